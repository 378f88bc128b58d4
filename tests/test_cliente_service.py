# tests/test_cliente_service.py
import pytest

from api.errors import ClienteNaoEncontradoError, DadosInvalidosError
from api.models.cliente_models import ClienteRequest
from api.services.cliente_service import ClienteService


class FakeClienteRepository:
    def __init__(self):
        self.rows = {}
        self.proximo_id = 1
        self.updates = []

    def listar(self):
        return list(self.rows.values())

    def buscar_por_id(self, cliente_id):
        return self.rows.get(cliente_id)

    def criar(self, nome, email):
        cliente_id = self.proximo_id
        self.proximo_id += 1
        self.rows[cliente_id] = {"cliente_id": cliente_id, "nome": nome, "email": email}
        return cliente_id

    def substituir(self, cliente_id, nome, email):
        if cliente_id not in self.rows:
            return 0
        self.rows[cliente_id].update(nome=nome, email=email)
        return 1

    def atualizar_campos(self, cliente_id, campos):
        self.updates.append(campos)
        if cliente_id not in self.rows:
            return 0
        self.rows[cliente_id].update(campos)
        return 1

    def remover(self, cliente_id):
        return 1 if self.rows.pop(cliente_id, None) else 0


@pytest.fixture
def repo():
    return FakeClienteRepository()


@pytest.fixture
def service(repo):
    return ClienteService(repo)


def test_criar_e_buscar(service):
    criado = service.criar(ClienteRequest(nome="Ana", email="ana@x.com"))
    assert criado.insertId == 1
    assert criado.message == "Cliente criado com sucesso!"

    cliente = service.buscar_por_id(1)
    assert cliente.nome == "Ana"
    assert cliente.email == "ana@x.com"


def test_criar_sem_email(service, repo):
    with pytest.raises(DadosInvalidosError):
        service.criar(ClienteRequest(nome="Ana"))
    assert repo.rows == {}


def test_buscar_inexistente(service):
    with pytest.raises(ClienteNaoEncontradoError) as exc:
        service.buscar_por_id(7)
    assert exc.value.status_code == 404


def test_patch_traduz_name_para_coluna_nome(service, repo):
    service.criar(ClienteRequest(nome="Ana", email="ana@x.com"))

    service.atualizar_parcial(1, {"name": "Ana Clara"})

    assert repo.updates == [{"nome": "Ana Clara"}]
    assert repo.rows[1]["nome"] == "Ana Clara"


def test_patch_recusa_chave_desconhecida_sem_tocar_no_repositorio(service, repo):
    service.criar(ClienteRequest(nome="Ana", email="ana@x.com"))

    with pytest.raises(DadosInvalidosError) as exc:
        service.atualizar_parcial(1, {"nome": "X", "cliente_id": 5})

    assert exc.value.message == "Campo não permitido: cliente_id"
    assert repo.updates == []


@pytest.mark.parametrize("valor", ["", "   ", None, 10])
def test_patch_recusa_valor_vazio_ou_nao_texto(service, repo, valor):
    service.criar(ClienteRequest(nome="Ana", email="ana@x.com"))

    with pytest.raises(DadosInvalidosError):
        service.atualizar_parcial(1, {"email": valor})
    assert repo.rows[1]["email"] == "ana@x.com"


def test_remover_inexistente(service):
    with pytest.raises(ClienteNaoEncontradoError):
        service.remover(3)


def test_criar_e_substituir_usam_a_mesma_regra_de_vazio_do_patch(service, repo):
    with pytest.raises(DadosInvalidosError):
        service.criar(ClienteRequest(nome="  ", email="ana@x.com"))
    assert repo.rows == {}

    service.criar(ClienteRequest(nome="Ana", email="ana@x.com"))
    with pytest.raises(DadosInvalidosError):
        service.substituir(1, ClienteRequest(nome="Ana", email="\t"))
    assert repo.rows[1]["email"] == "ana@x.com"
