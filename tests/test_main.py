# tests/test_main.py
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from api.main import create_app


def test_app_cria_e_libera_o_proprio_pool(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.local")
    monkeypatch.setenv("DB_USER", "app")
    monkeypatch.setenv("DB_PASSWORD", "segredo")
    monkeypatch.setenv("DB_NAME", "loja")
    monkeypatch.setenv("DB_PORT", "3306")
    monkeypatch.setenv("DB_CONNECTION_LIMIT", "4")
    monkeypatch.setenv("DB_WAIT_FOR_CONNECTIONS", "true")

    liberados = []
    monkeypatch.setattr(Engine, "dispose", lambda self, close=True: liberados.append(self))

    app = create_app()
    with TestClient(app):
        engine = app.state.engine
        assert isinstance(engine, Engine)
        assert engine.pool.size() == 4
        assert engine.url.host == "db.local"
        assert liberados == []

    assert liberados == [engine]


def test_app_nao_libera_engine_recebido(monkeypatch, engine):
    liberados = []
    monkeypatch.setattr(Engine, "dispose", lambda self, close=True: liberados.append(self))

    app = create_app(engine=engine)
    with TestClient(app):
        assert app.state.engine is engine

    assert liberados == []
