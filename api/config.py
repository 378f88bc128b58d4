# api/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Carrega .env a partir da raiz do projeto
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

PORTA_PADRAO = 3306


def _ler_bool(valor: Optional[str], padrao: bool) -> bool:
    if valor is None or valor.strip() == "":
        return padrao
    return valor.strip().lower() in ("1", "true", "sim", "yes", "on")


def _ler_int(valor: Optional[str], padrao: int) -> int:
    if valor is None or valor.strip() == "":
        return padrao
    return int(valor)


@dataclass(frozen=True)
class DatabaseSettings:
    host: str = "localhost"
    user: str = ""
    password: str = ""
    database: str = ""
    port: int = PORTA_PADRAO
    connection_limit: int = 10
    wait_for_connections: bool = True

    @property
    def credenciais_completas(self) -> bool:
        return all([self.user, self.database])


def carregar_configuracao() -> DatabaseSettings:
    """
    Monta a configuração do banco a partir do ambiente.
    DB_PORT vazio ou ausente cai na porta padrão do MySQL.
    """
    load_dotenv(ENV_PATH)

    # pool_size < 1 no QueuePool significa pool sem limite
    connection_limit = _ler_int(os.getenv("DB_CONNECTION_LIMIT"), 10)
    if connection_limit < 1:
        raise ValueError(f"DB_CONNECTION_LIMIT deve ser maior que zero (recebido: {connection_limit})")

    return DatabaseSettings(
        host=os.getenv("DB_HOST") or "localhost",
        user=os.getenv("DB_USER", ""),
        password=os.getenv("DB_PASSWORD", ""),
        database=os.getenv("DB_NAME", ""),
        port=_ler_int(os.getenv("DB_PORT"), PORTA_PADRAO),
        connection_limit=connection_limit,
        wait_for_connections=_ler_bool(os.getenv("DB_WAIT_FOR_CONNECTIONS"), True),
    )
