from enum import Enum


class TipoLancamento(Enum):
    """Natureza do lançamento financeiro."""
    RECEITA = "RECEITA"
    DESPESA = "DESPESA"

    @classmethod
    def criar_de_nome(cls, nome: "str | TipoLancamento") -> "TipoLancamento":
        if isinstance(nome, cls):
            return nome
        try:
            return cls[str(nome).strip().upper()]
        except KeyError:
            opcoes = ", ".join(e.name for e in cls)
            raise ValueError(f"Tipo de lançamento inválido. Utilize um dos seguintes: {opcoes}.")


class StatusLancamento(Enum):
    """Ciclo de vida de um lançamento."""
    PENDENTE = "PENDENTE"
    EFETIVADO = "EFETIVADO"
    CANCELADO = "CANCELADO"

    @classmethod
    def criar_de_nome(cls, nome: "str | StatusLancamento") -> "StatusLancamento":
        if isinstance(nome, cls):
            return nome
        try:
            return cls[str(nome).strip().upper()]
        except KeyError:
            opcoes = ", ".join(e.name for e in cls)
            raise ValueError(f"Status de lançamento inválido. Utilize um dos seguintes: {opcoes}.")
