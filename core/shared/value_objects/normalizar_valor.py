from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union
import re

ValorBruto = Union[str, int, float, Decimal]

_DUAS_CASAS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class ValorMonetario:
    """Value Object imutável para valores de lançamento, sempre com 2 casas decimais."""

    valor: Decimal

    def __post_init__(self) -> None:
        if not self.valor.is_finite():
            raise ValueError(f"Valor inválido: '{self.valor}'.")
        object.__setattr__(self, "valor", self.valor.quantize(_DUAS_CASAS, rounding=ROUND_HALF_EVEN))

    @classmethod
    def from_bruto(cls, bruto: ValorBruto) -> "ValorMonetario":
        """Normaliza entradas como "R$ 1.234,56", "1234,56", 1234.5 ou Decimal."""
        if isinstance(bruto, bool):
            raise ValueError("Tipo de valor não suportado.")

        if isinstance(bruto, Decimal):
            return cls(bruto)

        if isinstance(bruto, (int, float)):
            return cls(Decimal(str(bruto)))

        if not isinstance(bruto, str):
            raise ValueError("Tipo de valor não suportado.")

        texto = re.sub(r"\s|R\$", "", bruto.strip())
        # 1.234,56 -> ponto é milhar; 1234,56 -> vírgula é decimal
        if "," in texto and "." in texto:
            texto = texto.replace(".", "").replace(",", ".")
        elif "," in texto:
            texto = texto.replace(",", ".")

        try:
            return cls(Decimal(texto))
        except InvalidOperation as exc:
            raise ValueError(f"Valor inválido: '{bruto}'.") from exc

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.valor:.2f}"
