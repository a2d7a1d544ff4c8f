from __future__ import annotations

from decimal import Decimal

from core.entities.lancamento import Lancamento
from core.exceptions import RegraNegocioException


def _e_inteiro(valor: object) -> bool:
    return isinstance(valor, int) and not isinstance(valor, bool)


def _e_valor_positivo(valor: object) -> bool:
    if isinstance(valor, bool) or not isinstance(valor, (Decimal, int, float)):
        return False
    # NaN e infinitos nunca são valores de lançamento
    if not Decimal(str(valor)).is_finite():
        return False
    return valor > 0


class LancamentoValidator:
    """Regras de validação de um lançamento, checadas sempre na mesma ordem.

    A primeira regra violada interrompe a validação, de modo que a mensagem
    de erro é determinística para um mesmo lançamento.
    """

    def validar(self, lancamento: Lancamento) -> None:
        descricao = lancamento.descricao
        if not isinstance(descricao, str) or not descricao.strip():
            raise RegraNegocioException("invalid description")

        if not _e_inteiro(lancamento.mes) or not 1 <= lancamento.mes <= 12:
            raise RegraNegocioException("invalid month")

        if not _e_inteiro(lancamento.ano) or not 1000 <= lancamento.ano <= 9999:
            raise RegraNegocioException("invalid year")

        if lancamento.usuario is None or lancamento.usuario.id is None:
            raise RegraNegocioException("missing user")

        if not _e_valor_positivo(lancamento.valor):
            raise RegraNegocioException("invalid value")

        if lancamento.tipo is None:
            raise RegraNegocioException("missing entry type")
