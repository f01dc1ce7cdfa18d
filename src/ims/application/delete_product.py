"""Application service: Delete Product use case."""

from __future__ import annotations

from ims.domain.model.session import Session
from ims.domain.model.store import InventoryStore


class DeleteProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, session: Session, name: str) -> None:
        self._store.require_access(session)
        self._store.delete_product(session, name.strip())
