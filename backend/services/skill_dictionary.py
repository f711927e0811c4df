"""Controlled skill vocabulary shared read-only across requests."""

import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from config import settings

logger = logging.getLogger(__name__)

DEFAULT_SKILLS_PATH = Path(__file__).parent / "data" / "skills.json"

_SINGLE_TOKEN_RE = re.compile(r"^[a-z]+$")


class SkillDictionary:
    """Immutable set of canonical (lowercase) skill names.

    Entries made only of letters are matched against tokens; every other
    entry (spaces, dots, symbols) is matched as a phrase in the text.
    """

    __slots__ = ("_skills", "_phrases")

    def __init__(self, skills: Iterable[str]):
        canonical = frozenset(s.strip().lower() for s in skills if s and s.strip())
        object.__setattr__(self, "_skills", canonical)
        object.__setattr__(
            self,
            "_phrases",
            tuple(sorted(s for s in canonical if not _SINGLE_TOKEN_RE.match(s))),
        )

    def __setattr__(self, name, value):
        raise AttributeError("SkillDictionary is read-only")

    def __contains__(self, skill: object) -> bool:
        return isinstance(skill, str) and skill.lower() in self._skills

    def __len__(self) -> int:
        return len(self._skills)

    def __iter__(self):
        return iter(sorted(self._skills))

    @property
    def skills(self) -> frozenset[str]:
        return self._skills

    @property
    def phrases(self) -> tuple[str, ...]:
        """Entries that cannot be matched as a single token."""
        return self._phrases


def load_skill_dictionary(path: str | Path | None = None) -> SkillDictionary:
    """Read a JSON list of skill names from disk."""
    source = Path(path) if path else DEFAULT_SKILLS_PATH
    with open(source, encoding="utf-8") as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError(f"Skill file {source} must contain a JSON list")
    dictionary = SkillDictionary(entries)
    logger.info("Loaded %d skills (%d phrases) from %s", len(dictionary), len(dictionary.phrases), source)
    return dictionary


@lru_cache(maxsize=1)
def get_skill_dictionary() -> SkillDictionary:
    """Process-wide dictionary, loaded once on first use."""
    return load_skill_dictionary(settings.skills_path or None)
