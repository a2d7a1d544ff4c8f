from __future__ import annotations

import bcrypt

# bcrypt só considera os primeiros 72 bytes e as versões recentes recusam o excedente
TAMANHO_MAXIMO_SENHA_BYTES = 72


def senha_excede_limite(senha: str) -> bool:
    return len(senha.encode("utf-8")) > TAMANHO_MAXIMO_SENHA_BYTES


def gerar_hash_senha(senha: str) -> str:
    """Hash bcrypt (salt embutido) da senha em texto plano."""
    return bcrypt.hashpw(senha.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verificar_senha(senha: str, senha_hash: str | None) -> bool:
    if not senha or not senha_hash or senha_excede_limite(senha):
        return False
    try:
        return bcrypt.checkpw(senha.encode("utf-8"), senha_hash.encode("utf-8"))
    except ValueError:
        # hash armazenado fora do formato bcrypt
        return False
