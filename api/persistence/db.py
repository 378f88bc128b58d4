# api/persistence/db.py
import logging
from contextlib import contextmanager
from urllib.parse import quote_plus

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, Connection

from api.config import DatabaseSettings

logger = logging.getLogger(__name__)


def build_database_url(settings: DatabaseSettings) -> str:
    user = quote_plus(settings.user)
    password = quote_plus(settings.password)

    # usamos mysql+mysqlconnector, mas continua tudo SQL puro
    return (
        f"mysql+mysqlconnector://{user}:{password}"
        f"@{settings.host}:{settings.port}/{settings.database}"
    )


def create_db_engine(settings: DatabaseSettings) -> Engine:
    """
    Cria o pool de conexões compartilhado pela aplicação.

    Nenhuma conexão é aberta aqui: credenciais erradas ou banco fora do ar
    só aparecem na primeira consulta.
    """
    if not settings.credenciais_completas:
        logger.warning("Variáveis de ambiente do banco incompletas (DB_USER/DB_NAME).")

    # None espera na fila; 0 rejeita na hora quando o pool está cheio
    pool_timeout = None if settings.wait_for_connections else 0

    engine: Engine = create_engine(
        build_database_url(settings),
        future=True,
        pool_pre_ping=True,
        pool_size=settings.connection_limit,
        max_overflow=0,
        pool_timeout=pool_timeout,
    )
    logger.info(
        f"Pool de conexões criado para {settings.host}:{settings.port}/{settings.database} "
        f"(limite={settings.connection_limit}, espera={settings.wait_for_connections})"
    )
    return engine


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


@contextmanager
def get_connection(engine: Engine) -> Connection:
    """
    Entrega uma conexão do SQLAlchemy já com transação aberta.
    Faz commit automático se der tudo certo, rollback se der erro.
    """
    conn: Connection = engine.connect()
    trans = conn.begin()
    try:
        yield conn
        trans.commit()
    except Exception:
        trans.rollback()
        raise
    finally:
        conn.close()
