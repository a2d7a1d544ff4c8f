from __future__ import annotations

from decimal import Decimal
from typing import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.entities import Lancamento, Usuario
from core.enums import TipoLancamento
from core.shared.entities import gerar_identificador
from infrastructure.data.mappings import metadata_obj, start_mappers


def criar_usuario(email: str = "usuario@email.com") -> Usuario:
    return Usuario(nome="usuario", email=email, senha="senha")


def criar_lancamento(usuario: Usuario | None = None) -> Lancamento:
    if usuario is None:
        usuario = Usuario(id=gerar_identificador(), nome="usuario", email="usuario@email.com")
    return Lancamento(
        descricao="Salário",
        mes=1,
        ano=2018,
        valor=Decimal("1000"),
        tipo=TipoLancamento.RECEITA,
        usuario=usuario,
    )


@pytest.fixture
def session() -> Iterator[Session]:
    start_mappers()
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    metadata_obj.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)
    sessao = factory()
    try:
        yield sessao
    finally:
        sessao.close()
        engine.dispose()
