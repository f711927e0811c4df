"""Shared test configuration, sample documents and fixtures."""

import pytest

from services.signals.registry import clear as clear_sources
from services.skill_dictionary import get_skill_dictionary


SAMPLE_RESUME = """Jane Smith
jane.smith@email.com | (555) 123-4567 | Austin, TX
linkedin.com/in/janesmith | github.com/janesmith

Summary
Engineer with 6 years building data platforms. Increased throughput by 40%.

Experience
Senior Software Engineer | Acme Technologies | 2022 - 2024
• Led migration of services to Kubernetes and AWS
• Built REST APIs in Python and Django

Software Engineer | Initech Solutions | 2020 - 2022
• Developed data pipelines with Kafka and PostgreSQL

Education
B.S. Computer Science | State University | 2018

Skills
Python, Django, PostgreSQL, Docker, Kubernetes, AWS, Kafka, Git, communication, leadership
"""

SAMPLE_JD = """Senior Software Engineer
About the role
We are hiring an engineer to build cloud services.

Requirements:
- Python and Django experience required
- PostgreSQL and Redis
- Kubernetes on AWS
- Strong communication skills

Nice to have: Terraform
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: runs the full scan pipeline end to end"
    )


@pytest.fixture(scope="session")
def dictionary():
    return get_skill_dictionary()


@pytest.fixture(autouse=True)
def _fresh_sources():
    clear_sources()
    yield
    clear_sources()


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd():
    return SAMPLE_JD
