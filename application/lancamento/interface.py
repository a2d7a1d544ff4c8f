# application/lancamento/interface.py

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Protocol, Sequence

from core.entities.lancamento import Lancamento
from core.enums import TipoLancamento
from .filtro import FiltroLancamento


class LancamentoRepositoryPort(Protocol):
    """Define o contrato para operações de persistência de Lancamento."""

    def salvar_lancamento(self, lancamento: Lancamento) -> Lancamento:
        """
        Cria um novo lançamento ou atualiza um existente.

        Retorna:
            A entidade persistida, com o `id` atribuído pelo repositório.
        """
        ...

    def deletar_lancamento(self, lancamento: Lancamento) -> None:
        ...

    def obter_por_id(self, lancamento_id: uuid.UUID) -> Lancamento | None:
        """
        Busca um Lancamento pelo seu ID.

        Retorna:
            A entidade correspondente ou None se não for encontrada.
        """
        ...

    def buscar_por_filtro(self, filtro: FiltroLancamento) -> Sequence[Lancamento]:
        """Lista os lançamentos que atendem a todos os campos informados no filtro."""
        ...

    def obter_saldo_por_tipo_e_usuario(
            self,
            usuario_id: uuid.UUID,
            tipo: TipoLancamento,
    ) -> Decimal | None:
        """
        Soma `valor` dos lançamentos do usuário com o tipo informado.

        Retorna:
            A soma, ou None quando não há lançamentos.
        """
        ...
