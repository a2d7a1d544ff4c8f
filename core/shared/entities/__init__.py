from .entity import Entity, gerar_identificador

__all__ = ["Entity", "gerar_identificador"]
