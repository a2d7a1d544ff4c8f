# application/usuario/interface.py

from __future__ import annotations

import uuid
from typing import Protocol

from core.entities.usuario import Usuario


class UsuarioRepositoryPort(Protocol):
    """Define o contrato para operações de persistência de Usuario."""

    def salvar_usuario(self, usuario: Usuario) -> Usuario:
        """
        Persiste um novo usuário.

        Retorna:
            A entidade persistida, com o `id` atribuído.
        """
        ...

    def obter_por_email(self, email: str) -> Usuario | None:
        """Busca um usuário pelo email; None quando não existe."""
        ...

    def existe_por_email(self, email: str) -> bool:
        ...

    def obter_por_id(self, usuario_id: uuid.UUID) -> Usuario | None:
        ...
