from .interface import UsuarioRepositoryPort
from .service import UsuarioService

__all__ = ["UsuarioRepositoryPort", "UsuarioService"]
