# api/services/cliente_service.py
import logging
from typing import Any, Dict, List

from api.errors import ClienteNaoEncontradoError, DadosInvalidosError
from api.models.cliente_models import Cliente, ClienteCriado, ClienteRequest, Mensagem
from api.persistence.repositories.cliente_repository import ClienteRepository

logger = logging.getLogger(__name__)

# chave aceita no corpo -> coluna da tabela
CAMPOS_PERMITIDOS = {
    "nome": "nome",
    "name": "nome",
    "email": "email",
}

MENSAGEM_OBRIGATORIOS = "Nome e email são obrigatórios."


def _preenchido(valor: Any) -> bool:
    return isinstance(valor, str) and bool(valor.strip())


class ClienteService:
    def __init__(self, cliente_repo: ClienteRepository):
        self.cliente_repo = cliente_repo

    def listar(self) -> List[Cliente]:
        return [Cliente(**r) for r in self.cliente_repo.listar()]

    def buscar_por_id(self, cliente_id: int) -> Cliente:
        row = self.cliente_repo.buscar_por_id(cliente_id)
        if not row:
            raise ClienteNaoEncontradoError()
        return Cliente(**row)

    def criar(self, dados: ClienteRequest) -> ClienteCriado:
        if not _preenchido(dados.nome) or not _preenchido(dados.email):
            raise DadosInvalidosError(MENSAGEM_OBRIGATORIOS)

        insert_id = self.cliente_repo.criar(dados.nome, dados.email)
        logger.info(f"Cliente {insert_id} criado")
        return ClienteCriado(message="Cliente criado com sucesso!", insertId=insert_id)

    def substituir(self, cliente_id: int, dados: ClienteRequest) -> Mensagem:
        if not _preenchido(dados.nome) or not _preenchido(dados.email):
            raise DadosInvalidosError(MENSAGEM_OBRIGATORIOS)

        if not self.cliente_repo.substituir(cliente_id, dados.nome, dados.email):
            raise ClienteNaoEncontradoError()
        logger.info(f"Cliente {cliente_id} atualizado")
        return Mensagem(message="Cliente atualizado com sucesso!")

    def atualizar_parcial(self, cliente_id: int, campos: Dict[str, Any]) -> Mensagem:
        """
        Atualiza só os campos enviados. Chaves fora de CAMPOS_PERMITIDOS e
        valores vazios são recusados antes de qualquer SQL ser montado.
        """
        if not campos:
            raise DadosInvalidosError("Nenhum campo para atualizar.")

        colunas: Dict[str, Any] = {}
        for chave, valor in campos.items():
            coluna = CAMPOS_PERMITIDOS.get(chave)
            if coluna is None:
                raise DadosInvalidosError(f"Campo não permitido: {chave}")
            if not _preenchido(valor):
                raise DadosInvalidosError(f"O campo {chave} não pode ser vazio.")
            colunas[coluna] = valor

        if not self.cliente_repo.atualizar_campos(cliente_id, colunas):
            raise ClienteNaoEncontradoError()
        logger.info(f"Cliente {cliente_id} atualizado parcialmente: {sorted(colunas)}")
        return Mensagem(message="Cliente atualizado com sucesso!")

    def remover(self, cliente_id: int) -> Mensagem:
        if not self.cliente_repo.remover(cliente_id):
            raise ClienteNaoEncontradoError()
        logger.info(f"Cliente {cliente_id} removido")
        return Mensagem(message="Cliente removido com sucesso!")
