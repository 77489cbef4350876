"""
Skills taxonomy lookup interface.

The taxonomy content (categories and their skills) is owned by an external
service; the engine only needs category membership by skill name.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional


class SkillsTaxonomy(ABC):
    """Category membership lookup for skill names."""

    @abstractmethod
    def category_of(self, skill_name: str) -> Optional[str]:
        """Category name for a skill, or None when the skill is unknown."""
        pass

    @abstractmethod
    def skills_in_category(self, category: str) -> List[str]:
        """All skill names in a category."""
        pass

    @abstractmethod
    def categories(self) -> List[str]:
        """All category names."""
        pass


class StaticSkillsTaxonomy(SkillsTaxonomy):
    """In-memory taxonomy built from a category -> skill names mapping."""

    def __init__(self, categories: Dict[str, Iterable[str]]):
        self._categories: Dict[str, List[str]] = {
            category: list(skills) for category, skills in categories.items()
        }
        self._index: Dict[str, str] = {}
        for category, skills in self._categories.items():
            for skill in skills:
                # first category wins for skills listed twice
                self._index.setdefault(skill.strip().lower(), category)

    def category_of(self, skill_name: str) -> Optional[str]:
        return self._index.get(skill_name.strip().lower())

    def skills_in_category(self, category: str) -> List[str]:
        return list(self._categories.get(category, []))

    def categories(self) -> List[str]:
        return list(self._categories)
