"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository interface keyed by string identifiers.

    Structure sources are read-mostly, so write operations may raise
    NotImplementedError.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def list(self) -> Dict[str, T]:
        """Map every available ID to its entity."""
        pass

    @abstractmethod
    def create(self, entity: T) -> T:
        """Create a new entity."""
        pass

    @abstractmethod
    def update(self, entity: T) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    def delete(self, id: str) -> None:
        """Delete an entity by ID."""
        pass
