from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence, Union

from core.entities.lancamento import Lancamento
from core.enums import StatusLancamento, TipoLancamento
from core.exceptions import PreconditionError
from .filtro import FiltroLancamento
from .interface import LancamentoRepositoryPort
from .validator import LancamentoValidator


_logger = logging.getLogger("minhas_financas.application.lancamento")


def _exigir_id(lancamento: Lancamento, operacao: str) -> None:
    if not lancamento.is_persisted:
        raise PreconditionError(f"Lancamento must be persisted before '{operacao}' (id is missing).")


@dataclass(slots=True)
class LancamentoService:
    """Aplicação (caso de uso) para manter os lançamentos e calcular o saldo."""

    repository: LancamentoRepositoryPort
    validator: LancamentoValidator = field(default_factory=LancamentoValidator)

    def salvar(self, lancamento: Lancamento) -> Lancamento:
        self.validar(lancamento)
        lancamento.status = StatusLancamento.PENDENTE
        salvo = self.repository.salvar_lancamento(lancamento)
        _logger.info(
            "Entry saved",
            extra={"entry_id": str(salvo.id), "user_id": str(salvo.usuario_id), "entry_type": salvo.tipo.name},
        )
        return salvo

    def atualizar(self, lancamento: Lancamento) -> Lancamento:
        _exigir_id(lancamento, "atualizar")
        self.validar(lancamento)
        lancamento.registrar_atualizacao()
        atualizado = self.repository.salvar_lancamento(lancamento)
        _logger.info("Entry updated", extra={"entry_id": str(atualizado.id)})
        return atualizado

    def deletar(self, lancamento: Lancamento) -> None:
        _exigir_id(lancamento, "deletar")
        self.repository.deletar_lancamento(lancamento)
        _logger.info("Entry deleted", extra={"entry_id": str(lancamento.id)})

    def buscar(self, filtro: Union[Lancamento, FiltroLancamento]) -> Sequence[Lancamento]:
        if isinstance(filtro, Lancamento):
            filtro = FiltroLancamento.de_lancamento(filtro)
        resultados = self.repository.buscar_por_filtro(filtro)
        _logger.debug(
            "Entries searched",
            extra={"filter_fields": sorted(filtro.campos_informados()), "count": len(resultados)},
        )
        return resultados

    def atualizar_status(self, lancamento: Lancamento, status: StatusLancamento) -> Lancamento:
        lancamento.status = status
        return self.atualizar(lancamento)

    def validar(self, lancamento: Lancamento) -> None:
        self.validator.validar(lancamento)

    def obter_por_id(self, lancamento_id: uuid.UUID) -> Lancamento | None:
        return self.repository.obter_por_id(lancamento_id)

    def obter_saldo_por_usuario(self, usuario_id: uuid.UUID) -> Decimal:
        receitas = self.repository.obter_saldo_por_tipo_e_usuario(usuario_id, TipoLancamento.RECEITA)
        despesas = self.repository.obter_saldo_por_tipo_e_usuario(usuario_id, TipoLancamento.DESPESA)
        # Sem lançamentos a soma vem nula
        saldo = (receitas or Decimal("0")) - (despesas or Decimal("0"))
        _logger.debug("Balance computed", extra={"user_id": str(usuario_id), "balance": str(saldo)})
        return saldo
