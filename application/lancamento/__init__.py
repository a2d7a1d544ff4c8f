from .filtro import FiltroLancamento
from .interface import LancamentoRepositoryPort
from .service import LancamentoService
from .validator import LancamentoValidator

__all__ = [
    "FiltroLancamento",
    "LancamentoRepositoryPort",
    "LancamentoService",
    "LancamentoValidator",
]
