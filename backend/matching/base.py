"""
Base interfaces for the candidate matchers.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from models.project import ProjectRequirements
from models.talent import TalentProfile

R = TypeVar("R")


class CandidateMatcher(ABC, Generic[R]):
    """Scores one criterion of a talent against a project.

    Implementations are stateless after construction: the same inputs always
    produce the same result and no matcher reads another matcher's output.
    """

    name: str = "matcher"

    @abstractmethod
    def evaluate(self, talent: TalentProfile, project: ProjectRequirements) -> R:
        """Evaluate the talent against the project for this criterion."""
        pass
