from .e_lancamento import StatusLancamento, TipoLancamento

__all__ = ["StatusLancamento", "TipoLancamento"]
