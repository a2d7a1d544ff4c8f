from .normalizar_valor import ValorMonetario

__all__ = ["ValorMonetario"]
