from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field


class ClienteRequest(BaseModel):
    # campos opcionais aqui; a presença é checada no service para responder 400
    nome: Optional[str] = Field(default=None, validation_alias=AliasChoices("nome", "name"))
    email: Optional[str] = None


class Cliente(BaseModel):
    cliente_id: int
    nome: str
    email: str


class ClienteCriado(BaseModel):
    message: str
    insertId: int


class Mensagem(BaseModel):
    message: str


class Resposta(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
