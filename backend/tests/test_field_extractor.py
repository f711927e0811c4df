"""Tests for the resume field heuristics."""

from services.field_extractor import (
    UNKNOWN_COMPANY,
    extract_education,
    extract_email,
    extract_experience,
    extract_job_title,
    extract_name,
    extract_phone,
    extract_resume_fields,
    split_lines,
)


class TestName:
    def test_first_capitalized_line(self):
        assert extract_name(["", "Jane Smith", "jane@x.com"]) == "Jane Smith"

    def test_three_word_name(self):
        assert extract_name(["Mary Anne Jones"]) == "Mary Anne Jones"

    def test_skips_contact_lines(self):
        lines = ["jane@example.com Jane", "(555) 123-4567 Jane", "Jane Smith"]
        assert extract_name(lines) == "Jane Smith"

    def test_skips_long_lines(self):
        lines = ["Experienced Developer " * 3, "Jane Smith"]
        assert extract_name(lines) == "Jane Smith"

    def test_only_first_five_lines_scanned(self):
        lines = ["one", "two", "three", "four", "five", "Jane Smith"]
        assert extract_name(lines) == "Unknown"

    def test_lowercase_words_rejected(self):
        assert extract_name(["jane smith", "hello world"]) == "Unknown"

    def test_single_word_rejected(self):
        assert extract_name(["Resume"]) == "Unknown"

    def test_empty(self):
        assert extract_name([]) == "Unknown"


class TestContact:
    def test_email(self):
        assert extract_email("Contact: jane.doe+jobs@mail.example.org today") == "jane.doe+jobs@mail.example.org"

    def test_no_email(self):
        assert extract_email("no contact here") == ""
        assert extract_email(None) == ""

    def test_phone_formats(self):
        assert extract_phone("Call (555) 123-4567 now") == "(555) 123-4567"
        assert extract_phone("+1 555.123.4567") == "+1 555.123.4567"
        assert extract_phone("555-123-4567 ext. 89") == "555-123-4567 ext. 89"

    def test_no_phone(self):
        assert extract_phone("Graduated 2019") == ""


class TestEducation:
    def test_degree_school_and_year(self):
        entries = extract_education(["B.S. Computer Science | State University | 2018"])
        assert len(entries) == 1
        assert entries[0].degree == "B.S."
        assert entries[0].school == "State University"
        assert entries[0].year == "2018"

    def test_school_keyword_first(self):
        entries = extract_education(["University of Michigan, 2016"])
        assert entries[0].degree == "Degree"
        assert entries[0].school == "University of Michigan"
        assert entries[0].year == "2016"

    def test_full_word_degree_any_case(self):
        entries = extract_education(["MASTER of Science"])
        assert entries[0].degree == "MASTER"
        assert entries[0].school == "MASTER of Science"

    def test_lowercase_abbreviation_ignored(self):
        entries = extract_education(["worked as a developer", "ma and pa shop"])
        assert entries[0].degree == "Not specified"

    def test_placeholder_when_nothing_found(self):
        entries = extract_education(["Skills", "Python"])
        assert len(entries) == 1
        assert entries[0].degree == "Not specified"
        assert entries[0].school == "Not specified"
        assert entries[0].year == ""


class TestExperience:
    def test_title_company_and_years(self):
        lines = ["Senior Software Engineer | Acme Technologies | 2020 - 2024"]
        entries = extract_experience(lines)
        assert entries[0].title == "Senior Software Engineer"
        assert entries[0].company == "Acme Technologies"
        assert entries[0].start_year == "2020"
        assert entries[0].end_year == "2024"
        assert entries[0].description == lines[0]

    def test_company_from_nearby_line(self):
        lines = ["Globex Corp", "Data Scientist", "2019"]
        entries = extract_experience(lines)
        assert entries[0].title == "Data Scientist"
        assert entries[0].company == "Globex Corp"
        assert entries[0].start_year == ""

    def test_company_outside_window_ignored(self):
        lines = ["Globex Corp", "", "", "Product Manager"]
        entries = extract_experience(lines)
        assert entries[0].company == UNKNOWN_COMPANY

    def test_known_employer(self):
        entries = extract_experience(["Web Developer at Google 2015 2017"])
        assert entries[0].company == "Google 2015 2017"
        assert entries[0].end_year == "2017"

    def test_placeholder(self):
        entries = extract_experience(["Hobbies", "Chess"])
        assert len(entries) == 1
        assert entries[0].title == "Not specified"
        assert entries[0].company == "Not specified"
        assert entries[0].description == ""


def test_extract_resume_fields(sample_resume, dictionary):
    doc = extract_resume_fields(sample_resume, dictionary)
    assert doc.name == "Jane Smith"
    assert doc.email == "jane.smith@email.com"
    assert doc.phone == "(555) 123-4567"
    assert [e.school for e in doc.education] == ["State University"]
    assert [e.title for e in doc.experience] == ["Senior Software Engineer", "Software Engineer"]
    assert [e.company for e in doc.experience] == ["Acme Technologies", "Initech Solutions"]
    assert {"python", "django", "kubernetes", "aws"} <= set(doc.skills)
    assert doc.skills == sorted(set(doc.skills))


def test_extract_resume_fields_empty(dictionary):
    doc = extract_resume_fields("", dictionary)
    assert doc.name == "Unknown"
    assert doc.email == ""
    assert doc.skills == []
    assert doc.education[0].degree == "Not specified"
    assert doc.experience[0].title == "Not specified"
    assert split_lines(None) == []


def test_extract_job_title(sample_jd):
    assert extract_job_title(sample_jd) == "Senior Software Engineer"
    assert extract_job_title("About us\nTitle: Data Engineer\n") == "Data Engineer"
    assert extract_job_title("") == "Position"
