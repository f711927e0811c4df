"""Dictionary-based skill extraction."""

from services.skill_dictionary import SkillDictionary
from services.tokenizer import tokenize


def extract_skills(text: str | None, dictionary: SkillDictionary) -> list[str]:
    """Return the sorted, deduplicated dictionary skills found in text.

    Single-word skills are matched against the token set; phrase skills
    (multi-word or containing symbols) are matched as substrings of the
    lowercased text.
    """
    if not text:
        return []
    found = {token for token in tokenize(text) if token in dictionary.skills}
    lowered = text.lower()
    found.update(phrase for phrase in dictionary.phrases if phrase in lowered)
    return sorted(found)
