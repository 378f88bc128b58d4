# api/routers/cliente_router.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.engine import Engine

from api.models.cliente_models import ClienteRequest, Resposta
from api.persistence.db import get_engine
from api.persistence.repositories.cliente_repository import ClienteRepository
from api.services.cliente_service import ClienteService


router = APIRouter(prefix="/clientes", tags=["clientes"])


def get_cliente_service(engine: Engine = Depends(get_engine)) -> ClienteService:
    repo = ClienteRepository(engine)
    return ClienteService(repo)


@router.get("", response_model=Resposta, response_model_exclude_none=True)
def listar_clientes(service: ClienteService = Depends(get_cliente_service)):
    return Resposta(success=True, data=service.listar())


@router.get("/{cliente_id}", response_model=Resposta, response_model_exclude_none=True)
def buscar_cliente(
    cliente_id: int,
    service: ClienteService = Depends(get_cliente_service),
):
    return Resposta(success=True, data=service.buscar_por_id(cliente_id))


@router.post("", response_model=Resposta, response_model_exclude_none=True, status_code=201)
def criar_cliente(
    dados: ClienteRequest,
    service: ClienteService = Depends(get_cliente_service),
):
    """
    Cria um cliente. `nome` (ou `name`) e `email` são obrigatórios.
    Retorna o id gerado pelo banco em `insertId`.
    """
    return Resposta(success=True, data=service.criar(dados))


@router.put("/{cliente_id}", response_model=Resposta, response_model_exclude_none=True)
def substituir_cliente(
    cliente_id: int,
    dados: ClienteRequest,
    service: ClienteService = Depends(get_cliente_service),
):
    return Resposta(success=True, data=service.substituir(cliente_id, dados))


@router.patch("/{cliente_id}", response_model=Resposta, response_model_exclude_none=True)
def atualizar_cliente(
    cliente_id: int,
    campos: Dict[str, Any] = Body(...),
    service: ClienteService = Depends(get_cliente_service),
):
    """
    Atualização parcial. Aceita apenas `nome`/`name` e `email`;
    qualquer outra chave devolve 400.
    """
    return Resposta(success=True, data=service.atualizar_parcial(cliente_id, campos))


@router.delete("/{cliente_id}", response_model=Resposta, response_model_exclude_none=True)
def remover_cliente(
    cliente_id: int,
    service: ClienteService = Depends(get_cliente_service),
):
    return Resposta(success=True, data=service.remover(cliente_id))
