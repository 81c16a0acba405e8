from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biomorphs.ec.mutations import Mutation


class Genotype(ABC):
    """Interface for different genotype types."""

    @staticmethod
    @abstractmethod
    def get_mutator_object() -> "Mutation":
        """Return the mutator operator for this genotype type."""
        raise NotImplementedError("Mutator operator not implemented for this genotype type.")

    @staticmethod
    @abstractmethod
    def create_individual(**kwargs: dict) -> "Genotype":
        """Generate a new individual of this genotype type."""
        raise NotImplementedError("Individual generation not implemented for this genotype type.")
