from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from api.config import carregar_configuracao
from api.errors import registrar_tratadores_de_erro
from api.persistence.db import create_db_engine
from api.routers.cliente_router import router as clientes_router
from api.utils.logger import configurar_logging


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """
    Monta a aplicação. Sem `engine`, o pool é criado a partir do ambiente
    na subida e liberado no desligamento.
    """
    configurar_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if engine is not None:
            app.state.engine = engine
            yield
            return

        app.state.engine = create_db_engine(carregar_configuracao())
        try:
            yield
        finally:
            app.state.engine.dispose()

    app = FastAPI(
        title="Clientes API",
        version="1.0.0",
        description="API REST de clientes com SQL puro e FastAPI.",
        lifespan=lifespan,
    )

    registrar_tratadores_de_erro(app)
    app.include_router(clientes_router)

    return app


app = create_app()
