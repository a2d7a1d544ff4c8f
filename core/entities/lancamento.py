from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from core.entities.usuario import Usuario
from core.enums import StatusLancamento, TipoLancamento
from core.shared.entities import Entity
from core.shared.value_objects import ValorMonetario
from core.shared.value_objects.normalizar_valor import ValorBruto


@dataclass(kw_only=True, eq=False)
class Lancamento(Entity):
    """Entidade de lançamento financeiro (receita ou despesa) de um usuário.

    - Campos ficam opcionais: um lançamento pode existir inválido até passar
      pelo validador, que é quem decide se ele pode ser persistido.
    - `usuario` referencia o titular; para consultas basta o seu `id`.
    """

    descricao: Optional[str] = None
    mes: Optional[int] = None
    ano: Optional[int] = None
    valor: Optional[Decimal] = None
    tipo: Optional[TipoLancamento] = None
    status: Optional[StatusLancamento] = None
    usuario: Optional[Usuario] = None

    # ----------------- Fábricas de criação -----------------
    @classmethod
    def criar(
        cls,
        descricao: str,
        mes: int,
        ano: int,
        valor: ValorBruto,
        tipo: Union[str, TipoLancamento],
        usuario: Optional[Usuario] = None,
        status: Optional[Union[str, StatusLancamento]] = None,
    ) -> "Lancamento":
        return cls(
            descricao=descricao,
            mes=mes,
            ano=ano,
            valor=ValorMonetario.from_bruto(valor).valor,
            tipo=TipoLancamento.criar_de_nome(tipo),
            status=StatusLancamento.criar_de_nome(status) if status is not None else None,
            usuario=usuario,
        )

    # ----------------- Consultas auxiliares -----------------
    @property
    def usuario_id(self):
        return self.usuario.id if self.usuario is not None else None

    def __repr__(self) -> str:
        return (
            f"Lancamento(id={self.id!r}, descricao={self.descricao!r}, mes={self.mes!r}, "
            f"ano={self.ano!r}, valor={self.valor!r}, tipo={self.tipo}, status={self.status})"
        )
