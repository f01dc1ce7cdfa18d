"""Abstract repository for the InventoryStore aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.store import InventoryStore


class StoreRepository(ABC):

    @abstractmethod
    def load(self) -> InventoryStore:
        """Return the persisted store, or an empty one if nothing usable exists.

        Never raises for missing or corrupt data.
        """

    @abstractmethod
    def save(self, store: InventoryStore) -> None:
        """Overwrite the persisted state with *store*.

        Raises PersistenceError if the state could not be written.
        """
