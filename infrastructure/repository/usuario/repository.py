# infrastructure/repository/usuario/repository.py
from __future__ import annotations
import logging
import uuid
from sqlalchemy import exists, select
from sqlalchemy.orm import Session
from application.usuario.interface import UsuarioRepositoryPort
from core.entities.usuario import Usuario
from infrastructure.data.mappings import usuario_table
_logger = logging.getLogger("minhas_financas.infrastructure.repository.usuario")
class UsuarioRepository(UsuarioRepositoryPort):
    """Repositório de persistência para Usuario baseado em SQLAlchemy."""
    def __init__(self, session: Session) -> None:
        self._session = session
    def salvar_usuario(self, usuario: Usuario) -> Usuario:
        usuario.atribuir_identidade()
        self._session.add(usuario)
        self._session.flush()
        _logger.info("Persisted user entity", extra={"id": str(usuario.id)})
        return usuario
    def obter_por_email(self, email: str) -> Usuario | None:
        consulta = select(Usuario).where(usuario_table.c.email == email)
        return self._session.execute(consulta).scalar_one_or_none()
    def existe_por_email(self, email: str) -> bool:
        consulta = select(exists().where(usuario_table.c.email == email))
        return bool(self._session.execute(consulta).scalar())
    def obter_por_id(self, usuario_id: uuid.UUID) -> Usuario | None:
        return self._session.get(Usuario, usuario_id)
