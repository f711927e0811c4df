from services.tokenizer import normalize, tokenize


def test_tokenize_empty_and_none():
    assert tokenize("") == set()
    assert tokenize(None) == set()


def test_tokenize_lowercases_and_strips_non_letters():
    assert tokenize("Python3, DOCKER & k8s!") == {"python", "docker"}


def test_tokenize_drops_stop_words_and_short_tokens():
    tokens = tokenize("I am a developer with the skills of an expert in R")
    assert tokens == {"developer", "skills", "expert"}


def test_tokenize_collapses_duplicates():
    assert tokenize("react react REACT") == {"react"}


def test_tokenize_splits_dotted_names():
    assert tokenize("Node.js") == {"node", "js"}


def test_normalize_collapses_punctuation():
    assert normalize("C++/Java") == "c java"
    assert normalize(None) == ""
