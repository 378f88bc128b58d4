# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from api.main import create_app

DDL_CLIENTES = """
    CREATE TABLE clientes (
        cliente_id INTEGER PRIMARY KEY AUTOINCREMENT,
        nome TEXT NOT NULL,
        email TEXT NOT NULL
    )
"""


def _sqlite_em_memoria():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    engine = _sqlite_em_memoria()
    with engine.begin() as conn:
        conn.execute(text(DDL_CLIENTES))
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    with TestClient(create_app(engine=engine)) as c:
        yield c


@pytest.fixture
def client_sem_tabela():
    # banco sem a tabela: toda consulta falha no driver
    engine = _sqlite_em_memoria()
    with TestClient(create_app(engine=engine)) as c:
        yield c
    engine.dispose()


def contar_clientes(engine) -> int:
    with engine.connect() as conn:
        return conn.execute(text("SELECT COUNT(*) FROM clientes")).scalar_one()
