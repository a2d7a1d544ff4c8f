# infrastructure/repository/lancamento/repository.py
from __future__ import annotations
import logging
import uuid
from decimal import Decimal
from sqlalchemy import asc, func, select
from sqlalchemy.orm import Session
from application.lancamento.filtro import FiltroLancamento
from application.lancamento.interface import LancamentoRepositoryPort
from core.entities.lancamento import Lancamento
from core.entities.usuario import Usuario
from core.enums import StatusLancamento, TipoLancamento
from infrastructure.data.mappings import lancamento_table
_logger = logging.getLogger("minhas_financas.infrastructure.repository.lancamento")
class LancamentoRepository(LancamentoRepositoryPort):
    """Repositório de persistência para Lancamento baseado em SQLAlchemy."""
    def __init__(self, session: Session) -> None:
        self._session = session
    def _anexar_usuario(self, lancamento: Lancamento) -> None:
        # O titular pode chegar apenas com o id; usa a instância gerenciada pela sessão
        usuario = lancamento.usuario
        if usuario is None or usuario.id is None or usuario in self._session:
            return
        gerenciado = self._session.get(Usuario, usuario.id)
        if gerenciado is None:
            raise LookupError(f"Usuario {usuario.id} not found.")
        lancamento.usuario = gerenciado
    def _preservar_estado_persistido(self, lancamento: Lancamento) -> None:
        # Um lançamento reconstruído traz created_at novo e pode vir sem status
        gerenciado = self._session.get(Lancamento, lancamento.id)
        if gerenciado is None or gerenciado is lancamento:
            if lancamento.status is None:
                lancamento.status = StatusLancamento.PENDENTE
            return
        lancamento.created_at = gerenciado.created_at
        if lancamento.status is None:
            lancamento.status = gerenciado.status
    def salvar_lancamento(self, lancamento: Lancamento) -> Lancamento:
        self._anexar_usuario(lancamento)
        if lancamento.id is None:
            lancamento.atribuir_identidade()
            self._session.add(lancamento)
            persistido = lancamento
        else:
            self._preservar_estado_persistido(lancamento)
            # Upsert via merge
            persistido = self._session.merge(lancamento)
        self._session.flush()
        _logger.info("Persisted entry entity", extra={"id": str(persistido.id)})
        return persistido
    def deletar_lancamento(self, lancamento: Lancamento) -> None:
        gerenciado = self._session.get(Lancamento, lancamento.id)
        if gerenciado is None:
            _logger.info("Entry already absent", extra={"id": str(lancamento.id)})
            return
        self._session.delete(gerenciado)
        self._session.flush()
        _logger.info("Deleted entry entity", extra={"id": str(lancamento.id)})
    def obter_por_id(self, lancamento_id: uuid.UUID) -> Lancamento | None:
        return self._session.get(Lancamento, lancamento_id)
    def buscar_por_filtro(self, filtro: FiltroLancamento) -> list[Lancamento]:
        colunas = lancamento_table.c
        consulta = select(Lancamento)
        if filtro.descricao is not None:
            consulta = consulta.where(colunas.descricao.icontains(filtro.descricao, autoescape=True))
        if filtro.mes is not None:
            consulta = consulta.where(colunas.mes == filtro.mes)
        if filtro.ano is not None:
            consulta = consulta.where(colunas.ano == filtro.ano)
        if filtro.usuario_id is not None:
            consulta = consulta.where(colunas.usuario_id == filtro.usuario_id)
        if filtro.tipo is not None:
            consulta = consulta.where(colunas.tipo == filtro.tipo)
        if filtro.status is not None:
            consulta = consulta.where(colunas.status == filtro.status)
        consulta = consulta.order_by(asc(colunas.created_at), asc(colunas.id))
        resultados = list(self._session.execute(consulta).scalars().all())
        _logger.debug(
            "Listed Lancamento entities",
            extra={"count": len(resultados), "filter_fields": sorted(filtro.campos_informados())},
        )
        return resultados
    def obter_saldo_por_tipo_e_usuario(
        self,
        usuario_id: uuid.UUID,
        tipo: TipoLancamento,
    ) -> Decimal | None:
        consulta = (
            select(func.sum(lancamento_table.c.valor))
            .where(lancamento_table.c.usuario_id == usuario_id)
            .where(lancamento_table.c.tipo == tipo)
        )
        return self._session.execute(consulta).scalar_one_or_none()
