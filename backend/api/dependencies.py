"""Shared dependencies for API routes."""

from services.skill_dictionary import SkillDictionary, get_skill_dictionary


def get_dictionary() -> SkillDictionary:
    return get_skill_dictionary()
