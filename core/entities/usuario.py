from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.shared.entities import Entity


@dataclass(kw_only=True, eq=False)
class Usuario(Entity):
    """Titular dos lançamentos. `senha` guarda o hash bcrypt depois do cadastro."""

    nome: Optional[str] = None
    email: Optional[str] = None
    senha: Optional[str] = None

    def __repr__(self) -> str:
        return f"Usuario(id={self.id!r}, nome={self.nome!r}, email={self.email!r})"
