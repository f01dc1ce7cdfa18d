"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that reads settings and knows
about *all* layers.  Every other module depends only on abstractions.
"""

from __future__ import annotations

from ims.config import get_settings
from ims.domain.repository.store_repository import StoreRepository
from ims.domain.service.access_gate import AccessGate, plaintext_credential
from ims.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)


def store_repository() -> StoreRepository:
    return JsonStoreRepository(get_settings().DATA_DIR)


def access_gate() -> AccessGate:
    return AccessGate(plaintext_credential(get_settings().ADMIN_PASSWORD))
