from __future__ import annotations

"""
Entry point for the finance tracker core.
- Composes services by constructor injection around one database session per command.
- Reads DATABASE_URL (or DB_*), INIT_DB_SCHEMA and LOG_LEVEL from environment variables.

Usage:
    python main.py init-db
    python main.py registrar-usuario NOME EMAIL SENHA
    python main.py saldo USUARIO_ID
    python main.py --log-level DEBUG saldo USUARIO_ID
"""

import argparse
import os
import sys
import uuid
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.orm import Session

from application.lancamento.service import LancamentoService
from application.usuario.service import UsuarioService
from core.entities.usuario import Usuario
from core.exceptions import DomainError
from infrastructure.configurations.logging_config import (
    configure_logging,
    generate_command_id,
    set_command_id,
    logger as app_logger,
)
from infrastructure.data.bootstrap import init_persistence
from infrastructure.data.db_context import get_database_session
from infrastructure.repository.lancamento.repository import LancamentoRepository
from infrastructure.repository.usuario.repository import UsuarioRepository


@dataclass(slots=True)
class Servicos:
    usuarios: UsuarioService
    lancamentos: LancamentoService


def build_services(session: Session) -> Servicos:
    return Servicos(
        usuarios=UsuarioService(UsuarioRepository(session)),
        lancamentos=LancamentoService(LancamentoRepository(session)),
    )


def _should_create_schema() -> bool:
    return os.getenv("INIT_DB_SCHEMA", "0").lower() in {"1", "true", "yes", "on"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minhas-financas")
    parser.add_argument("--log-level", default=None, help="Sobrescreve LOG_LEVEL (ex.: DEBUG).")
    comandos = parser.add_subparsers(dest="comando", required=True)

    comandos.add_parser("init-db", help="Cria as tabelas no banco configurado.")

    registrar = comandos.add_parser("registrar-usuario", help="Cadastra um novo usuário.")
    registrar.add_argument("nome")
    registrar.add_argument("email")
    registrar.add_argument("senha")

    saldo = comandos.add_parser("saldo", help="Mostra o saldo (receitas - despesas) de um usuário.")
    saldo.add_argument("usuario_id", type=uuid.UUID)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)
    set_command_id(generate_command_id())
    app_logger.debug("Command started", extra={"command": args.comando})

    init_persistence(create_schema=args.comando == "init-db" or _should_create_schema())
    if args.comando == "init-db":
        app_logger.info("Database schema ready")
        return 0

    try:
        with get_database_session() as session:
            servicos = build_services(session)
            if args.comando == "registrar-usuario":
                usuario = servicos.usuarios.salvar_usuario(
                    Usuario(nome=args.nome, email=args.email, senha=args.senha)
                )
                print(usuario.id)
            else:
                if servicos.usuarios.obter_por_id(args.usuario_id) is None:
                    print(f"Usuário não encontrado: {args.usuario_id}", file=sys.stderr)
                    return 1
                print(f"{servicos.lancamentos.obter_saldo_por_usuario(args.usuario_id):.2f}")
    except DomainError as erro:
        print(erro.message, file=sys.stderr)
        return 1
    finally:
        set_command_id(None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
