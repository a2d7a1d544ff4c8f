from __future__ import annotations

from sqlalchemy import (
    inspect,
    Table,
    Column,
    MetaData,
    String,
    Integer,
    DateTime,
    Numeric,
    Enum,
    ForeignKey,
    Uuid,
)
from sqlalchemy.orm import registry, relationship

from core.entities.lancamento import Lancamento
from core.entities.usuario import Usuario
from core.enums import StatusLancamento, TipoLancamento

# Dedicated registry/metadata for infrastructure mappings (core stays framework-agnostic)
mapper_registry = registry()
metadata_obj: MetaData = mapper_registry.metadata

# --- Tables ---
usuario_table = Table(
    "usuario",
    metadata_obj,
    Column("id", Uuid(as_uuid=True), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
    Column("nome", String(150), nullable=True),
    Column("email", String(150), nullable=False, unique=True),
    Column("senha", String(100), nullable=False),
)

lancamento_table = Table(
    "lancamento",
    metadata_obj,
    Column("id", Uuid(as_uuid=True), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
    Column("descricao", String(100), nullable=False),
    Column("mes", Integer, nullable=False),
    Column("ano", Integer, nullable=False),
    Column("valor", Numeric(16, 2), nullable=False),
    Column("tipo", Enum(TipoLancamento, name="tipo_lancamento"), nullable=False),
    Column("status", Enum(StatusLancamento, name="status_lancamento"), nullable=False),
    Column("usuario_id", Uuid(as_uuid=True), ForeignKey("usuario.id"), nullable=False, index=True),
)


# --- Mapping bootstrap ---
def start_mappers() -> None:
    """Configure classical mappings. Safe to call more than once."""
    if inspect(Lancamento, raiseerr=False) is not None:
        return
    mapper_registry.map_imperatively(Usuario, usuario_table)
    mapper_registry.map_imperatively(
        Lancamento,
        lancamento_table,
        properties={
            "usuario": relationship(Usuario, lazy="joined"),
            # the domain exposes `usuario_id` as a read-only property
            "_usuario_id": lancamento_table.c.usuario_id,
        },
    )
