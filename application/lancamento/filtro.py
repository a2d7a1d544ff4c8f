from __future__ import annotations

import uuid
from dataclasses import dataclass, fields
from typing import Any, Optional

from core.entities.lancamento import Lancamento
from core.enums import StatusLancamento, TipoLancamento


@dataclass(frozen=True, slots=True)
class FiltroLancamento:
    """Consulta por exemplo: somente os campos não nulos restringem a busca.

    `descricao` casa por trecho, sem diferenciar maiúsculas; os demais por igualdade.
    """

    descricao: Optional[str] = None
    mes: Optional[int] = None
    ano: Optional[int] = None
    usuario_id: Optional[uuid.UUID] = None
    tipo: Optional[TipoLancamento] = None
    status: Optional[StatusLancamento] = None

    @classmethod
    def de_lancamento(cls, lancamento: Lancamento) -> "FiltroLancamento":
        descricao = lancamento.descricao.strip() if lancamento.descricao else None
        return cls(
            descricao=descricao or None,
            mes=lancamento.mes,
            ano=lancamento.ano,
            usuario_id=lancamento.usuario_id,
            tipo=lancamento.tipo,
            status=lancamento.status,
        )

    def campos_informados(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
