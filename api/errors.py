# api/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

MENSAGEM_ERRO_INTERNO = "Erro interno do servidor."
MENSAGEM_CORPO_INVALIDO = "Corpo da requisição inválido."


class ClienteError(Exception):
    """Erro de domínio com status HTTP e mensagem segura para o cliente."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DadosInvalidosError(ClienteError):
    status_code = 400


class ClienteNaoEncontradoError(ClienteError):
    status_code = 404

    def __init__(self, message: str = "Cliente não encontrado."):
        super().__init__(message)


def resposta_de_erro(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def _tratar_cliente_error(request: Request, exc: ClienteError) -> JSONResponse:
    return resposta_de_erro(exc.status_code, exc.message)


async def _tratar_validacao(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Requisição inválida em {request.method} {request.url.path}: {exc.errors()}")
    return resposta_de_erro(400, MENSAGEM_CORPO_INVALIDO)


async def _tratar_erro_banco(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # o texto do driver fica só no log
    logger.error(f"Erro de banco em {request.method} {request.url.path}: {exc}")
    return resposta_de_erro(500, MENSAGEM_ERRO_INTERNO)


async def _tratar_erro_inesperado(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Erro inesperado em {request.method} {request.url.path}")
    return resposta_de_erro(500, MENSAGEM_ERRO_INTERNO)


def registrar_tratadores_de_erro(app: FastAPI) -> None:
    app.add_exception_handler(ClienteError, _tratar_cliente_error)
    app.add_exception_handler(RequestValidationError, _tratar_validacao)
    app.add_exception_handler(SQLAlchemyError, _tratar_erro_banco)
    app.add_exception_handler(Exception, _tratar_erro_inesperado)
