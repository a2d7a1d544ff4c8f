from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from core.entities.usuario import Usuario
from core.exceptions import ErroAutenticacao, RegraNegocioException
from .interface import UsuarioRepositoryPort
from .senha import gerar_hash_senha, senha_excede_limite, verificar_senha


_logger = logging.getLogger("minhas_financas.application.usuario")


@dataclass(slots=True)
class UsuarioService:
    """Caso de uso de cadastro e autenticação de usuários."""

    repository: UsuarioRepositoryPort

    def autenticar(self, email: str, senha: str) -> Usuario:
        usuario = self.repository.obter_por_email(email)
        if usuario is None:
            _logger.info("Authentication failed: unknown email")
            raise ErroAutenticacao("user not found")

        if not verificar_senha(senha, usuario.senha):
            _logger.info("Authentication failed: invalid password", extra={"user_id": str(usuario.id)})
            raise ErroAutenticacao("invalid password")

        _logger.info("User authenticated", extra={"user_id": str(usuario.id)})
        return usuario

    def salvar_usuario(self, usuario: Usuario) -> Usuario:
        self.validar_email(usuario.email)
        self.validar_senha(usuario.senha)
        usuario.senha = gerar_hash_senha(usuario.senha)
        salvo = self.repository.salvar_usuario(usuario)
        _logger.info("User registered", extra={"user_id": str(salvo.id)})
        return salvo

    def validar_email(self, email: str | None) -> None:
        if self.repository.existe_por_email(email):
            raise RegraNegocioException("email already registered")

    def validar_senha(self, senha: str | None) -> None:
        if not senha:
            raise RegraNegocioException("missing password")
        if senha_excede_limite(senha):
            raise RegraNegocioException("password too long")

    def obter_por_id(self, usuario_id: uuid.UUID) -> Usuario | None:
        return self.repository.obter_por_id(usuario_id)
