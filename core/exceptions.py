from __future__ import annotations


class DomainError(Exception):
    """Base for errors surfaced to the caller with a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ErroAutenticacao(DomainError):
    """Credenciais inválidas ou usuário inexistente."""


class RegraNegocioException(DomainError):
    """Violação de validação ou de unicidade."""


class PreconditionError(ValueError):
    """Contrato do chamador violado (ex.: atualizar um lançamento sem id)."""


# English aliases
AuthenticationError = ErroAutenticacao
BusinessRuleError = RegraNegocioException

__all__ = [
    "DomainError",
    "ErroAutenticacao",
    "RegraNegocioException",
    "PreconditionError",
    "AuthenticationError",
    "BusinessRuleError",
]
