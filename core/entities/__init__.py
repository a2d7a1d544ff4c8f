from .lancamento import Lancamento
from .usuario import Usuario

__all__ = ["Lancamento", "Usuario"]
