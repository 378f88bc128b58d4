# api/persistence/repositories/cliente_repository.py
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from api.persistence.db import get_connection

# colunas que podem entrar no texto do SQL de um UPDATE parcial
COLUNAS_ATUALIZAVEIS = ("nome", "email")


class ClienteRepository:
    """
    Acesso à tabela clientes usando SQLAlchemy Core + SQL puro.
    Cada método faz uma única ida ao banco.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def listar(self) -> List[Dict[str, Any]]:
        with get_connection(self.engine) as conn:
            rows = conn.execute(
                text("""
                    SELECT cliente_id,
                           nome,
                           email
                      FROM clientes
                """)
            ).mappings().all()

        return [dict(r) for r in rows]

    def buscar_por_id(self, cliente_id: int) -> Optional[Dict[str, Any]]:
        with get_connection(self.engine) as conn:
            row = conn.execute(
                text("""
                    SELECT cliente_id,
                           nome,
                           email
                      FROM clientes
                     WHERE cliente_id = :cliente_id
                """),
                {"cliente_id": cliente_id},
            ).mappings().first()

        return dict(row) if row else None

    def criar(self, nome: str, email: str) -> int:
        """Insere o cliente e devolve o id gerado pelo banco."""
        with get_connection(self.engine) as conn:
            result = conn.execute(
                text("""
                    INSERT INTO clientes (nome, email)
                    VALUES (:nome, :email)
                """),
                {"nome": nome, "email": email},
            )
            return result.lastrowid

    def substituir(self, cliente_id: int, nome: str, email: str) -> int:
        with get_connection(self.engine) as conn:
            result = conn.execute(
                text("""
                    UPDATE clientes
                       SET nome = :nome,
                           email = :email
                     WHERE cliente_id = :cliente_id
                """),
                {"nome": nome, "email": email, "cliente_id": cliente_id},
            )
            return result.rowcount

    def atualizar_campos(self, cliente_id: int, campos: Dict[str, Any]) -> int:
        """
        UPDATE parcial. As chaves de `campos` são nomes de coluna e precisam
        estar em COLUNAS_ATUALIZAVEIS; só os valores viram parâmetros.
        """
        if not campos:
            raise ValueError("Nenhuma coluna informada para atualização")
        for coluna in campos:
            if coluna not in COLUNAS_ATUALIZAVEIS:
                raise ValueError(f"Coluna não atualizável: {coluna}")

        set_clause = ", ".join(f"{coluna} = :{coluna}" for coluna in campos)
        params = dict(campos)
        params["cliente_id"] = cliente_id

        with get_connection(self.engine) as conn:
            result = conn.execute(
                text(f"UPDATE clientes SET {set_clause} WHERE cliente_id = :cliente_id"),
                params,
            )
            return result.rowcount

    def remover(self, cliente_id: int) -> int:
        with get_connection(self.engine) as conn:
            result = conn.execute(
                text("""
                    DELETE FROM clientes
                     WHERE cliente_id = :cliente_id
                """),
                {"cliente_id": cliente_id},
            )
            return result.rowcount
