from __future__ import annotations

import uuid as _uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from uuid_extensions import uuid7


def gerar_identificador() -> _uuid.UUID:
    """Time-ordered identity (UUIDv7) assigned by the store on first save."""
    return uuid7()


@dataclass(kw_only=True, eq=False)
class Entity:
    """Base entity: identity is absent until persisted; created_at (UTC) set on instantiation."""

    # Assigned by the persistence layer
    id: Optional[_uuid.UUID] = None

    # Basic auditing
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def atribuir_identidade(self) -> _uuid.UUID:
        """Assign a new UUIDv7 when the entity has none yet; returns the identity."""
        if self.id is None:
            self.id = gerar_identificador()
        return self.id

    def registrar_atualizacao(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
