"""
Testes Unitários para Use Cases do Domínio de Usuários.

Estratégia de Teste:
- Usa InMemoryUsuarioRepository / InMemoryPiuRepository reais
- Usa InMemoryUnitOfWork com lock próprio
- Verifica Ok/Err e as mensagens exatas

Coverage:
- CriarUsuarioService
- AtualizarUsuarioService
- RemoverUsuarioService (cascata)
- ListarUsuariosService
- ObterUsuarioService
"""

from datetime import date

import pytest

from src.core.usuarios.use_cases import (
    AtualizarUsuarioService,
    CriarUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
    RemoverUsuarioService,
)
from src.core.usuarios.dtos import AtualizarUsuarioInputDTO, CriarUsuarioInputDTO
from src.core.usuarios.ports import InMemoryUsuarioRepository
from src.core.pius.ports import InMemoryPiuRepository
from src.core.shared.exceptions import (
    CampoDuplicadoError,
    CampoObrigatorioError,
    CPFInvalidoError,
    EntityNotFoundError,
    TelefoneInvalidoError,
)
from src.core.shared.interfaces import InMemoryUnitOfWork


@pytest.fixture
def usuario_repo(fake_clock):
    return InMemoryUsuarioRepository(clock=fake_clock)


@pytest.fixture
def piu_repo(fake_clock):
    return InMemoryPiuRepository(clock=fake_clock)


@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


@pytest.fixture
def criar_service(usuario_repo, uow):
    return CriarUsuarioService(usuario_repo, uow)


@pytest.fixture
def atualizar_service(usuario_repo, uow):
    return AtualizarUsuarioService(usuario_repo, uow)


@pytest.fixture
def usuario(criar_service, usuario_data):
    """Usuário já cadastrado (ana)."""
    return criar_service.execute(CriarUsuarioInputDTO(**usuario_data)).unwrap()


@pytest.fixture
def outro_usuario_data():
    return {
        'username': 'bruno',
        'email': 'bruno@example.com',
        'nome': 'Bruno Lima',
        'nascimento': date(1985, 5, 5),
        'cpf': '987.654.321-00',
        'telefone': '(21) 99876-5432',
    }


# =============================================================================
# CriarUsuarioService
# =============================================================================

class TestCriarUsuarioService:

    def test_criar_normaliza_cpf_e_telefone(self, criar_service, usuario_data, uow):
        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert result.is_ok
        assert result.value.cpf == "123.456.789-09"
        assert result.value.telefone == "(11) 98765-4321"
        assert result.value.sobre == ""
        assert uow.committed

    def test_criar_com_sobre(self, criar_service, usuario_data):
        result = criar_service.execute(CriarUsuarioInputDTO(sobre="Oi!", **usuario_data))

        assert result.value.sobre == "Oi!"

    def test_criar_persiste(self, criar_service, usuario_data, usuario_repo):
        output = criar_service.execute(CriarUsuarioInputDTO(**usuario_data)).unwrap()

        salvo = usuario_repo.get_by_id(output.id)
        assert salvo.username == "ana"
        assert salvo.criado_em == salvo.atualizado_em
        assert usuario_repo.cpf_exists("123.456.789-09")

    @pytest.mark.parametrize("campo", ["username", "email", "nome", "nascimento", "cpf", "telefone"])
    def test_campo_obrigatorio_ausente(self, criar_service, usuario_data, campo):
        usuario_data[campo] = None

        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert result.is_err
        assert isinstance(result.error, CampoObrigatorioError)
        assert result.error.message == "Todos os campos são obrigatórios"

    def test_campo_vazio_conta_como_ausente(self, criar_service, usuario_data):
        usuario_data["email"] = ""

        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert isinstance(result.error, CampoObrigatorioError)

    def test_email_duplicado(self, criar_service, usuario, outro_usuario_data):
        outro_usuario_data["email"] = "ana@example.com"

        result = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data))

        assert result.error == CampoDuplicadoError("email")
        assert result.error.message == "Este email já está em uso"

    def test_username_duplicado(self, criar_service, usuario, outro_usuario_data):
        outro_usuario_data["username"] = "ana"

        result = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data))

        assert result.error.message == "Este username já está em uso"

    def test_email_verificado_antes_do_username(self, criar_service, usuario, usuario_data):
        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert result.error == CampoDuplicadoError("email")

    def test_cpf_duplicado_em_outro_formato(self, criar_service, usuario, outro_usuario_data):
        outro_usuario_data["cpf"] = "123.456.789-09"

        result = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data))

        assert result.error.message == "Este CPF já está cadastrado"

    def test_telefone_duplicado_em_outro_formato(self, criar_service, usuario, outro_usuario_data):
        outro_usuario_data["telefone"] = "(11) 98765-4321"

        result = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data))

        assert result.error.message == "Este telefone já está cadastrado"

    def test_cpf_invalido(self, criar_service, usuario_data, usuario_repo):
        usuario_data["cpf"] = "12345678900"

        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert isinstance(result.error, CPFInvalidoError)
        assert result.error.message == "O CPF informado não é válido"
        assert usuario_repo.count() == 0

    def test_cpf_todos_iguais(self, criar_service, usuario_data):
        usuario_data["cpf"] = "111.111.111-11"

        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert isinstance(result.error, CPFInvalidoError)

    @pytest.mark.parametrize("telefone", ["1198765432", "(11) 8765-4321", "telefone"])
    def test_telefone_invalido(self, criar_service, usuario_data, telefone):
        usuario_data["telefone"] = telefone

        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert isinstance(result.error, TelefoneInvalidoError)
        assert result.error.message == "O telefone deve estar no formato (XX) XXXXX-XXXX"

    def test_unicidade_entre_varios_usuarios(self, criar_service, usuario, outro_usuario_data, usuario_repo):
        criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data)).unwrap()

        for campo in ("username", "email", "cpf", "telefone"):
            valores = [getattr(u, campo) for u in usuario_repo.list_all()]
            assert len(valores) == len(set(valores))

    @pytest.mark.parametrize("telefone", ["(١١) ٩٨٧٦٥-٤٣٢١", "١١٩٨٧٦٥٤٣٢١"])
    def test_telefone_com_digitos_unicode_nao_duplica_cadastro(
        self, criar_service, usuario, outro_usuario_data, usuario_repo, telefone
    ):
        outro_usuario_data["telefone"] = telefone

        result = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data))

        assert result.is_err
        assert isinstance(result.error, TelefoneInvalidoError)
        assert usuario_repo.count() == 1
        assert not usuario_repo.telefone_exists(telefone)


# =============================================================================
# AtualizarUsuarioService
# =============================================================================

class TestAtualizarUsuarioService:

    def test_atualizar_nome(self, atualizar_service, usuario):
        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(nome="Ana Maria"))

        assert result.is_ok
        assert result.value.nome == "Ana Maria"
        assert result.value.email == usuario.email
        assert result.value.criado_em == usuario.criado_em
        assert result.value.atualizado_em > usuario.atualizado_em

    def test_usuario_inexistente(self, atualizar_service):
        result = atualizar_service.execute("nada", AtualizarUsuarioInputDTO(nome="X"))

        assert isinstance(result.error, EntityNotFoundError)
        assert result.error.message == "Usuário não encontrado"

    def test_mesmo_email_nao_e_duplicidade(self, atualizar_service, usuario):
        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(email=usuario.email))

        assert result.is_ok

    def test_mesmo_cpf_em_outro_formato_nao_e_duplicidade(self, atualizar_service, usuario):
        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(cpf="12345678909"))

        assert result.is_ok
        assert result.value.cpf == "123.456.789-09"

    def test_email_de_outro_usuario(self, atualizar_service, criar_service, usuario, outro_usuario_data):
        bruno = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data)).unwrap()

        result = atualizar_service.execute(bruno.id, AtualizarUsuarioInputDTO(email="ana@example.com"))

        assert result.error.message == "Este email já está em uso"

    def test_cpf_de_outro_usuario(self, atualizar_service, criar_service, usuario, outro_usuario_data):
        bruno = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data)).unwrap()

        result = atualizar_service.execute(bruno.id, AtualizarUsuarioInputDTO(cpf="12345678909"))

        assert result.error.message == "Este CPF já está cadastrado"

    def test_cpf_invalido(self, atualizar_service, usuario):
        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(cpf="000.000.000-00"))

        assert isinstance(result.error, CPFInvalidoError)

    def test_telefone_normalizado(self, atualizar_service, usuario, usuario_repo):
        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(telefone="21912345678"))

        assert result.value.telefone == "(21) 91234-5678"
        assert usuario_repo.telefone_exists("(21) 91234-5678")
        assert not usuario_repo.telefone_exists("(11) 98765-4321")

    def test_telefone_invalido(self, atualizar_service, usuario):
        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(telefone="123"))

        assert isinstance(result.error, TelefoneInvalidoError)

    def test_username_liberado_apos_troca(self, atualizar_service, criar_service, usuario, outro_usuario_data):
        atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(username="ana2")).unwrap()
        outro_usuario_data["username"] = "ana"

        result = criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data))

        assert result.is_ok

    def test_string_vazia_mantem_valor(self, atualizar_service, usuario):
        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(nome=""))

        assert result.value.nome == usuario.nome

    def test_sobre_vazio_limpa(self, atualizar_service, usuario):
        atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(sobre="bio")).unwrap()

        result = atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(sobre=""))

        assert result.value.sobre == ""

    def test_erro_nao_altera_usuario(self, atualizar_service, usuario, usuario_repo):
        atualizar_service.execute(usuario.id, AtualizarUsuarioInputDTO(nome="Outra", cpf="123"))

        assert usuario_repo.get_by_id(usuario.id).nome == usuario.nome


# =============================================================================
# RemoverUsuarioService
# =============================================================================

class TestRemoverUsuarioService:

    @pytest.fixture
    def remover_service(self, usuario_repo, piu_repo, uow):
        return RemoverUsuarioService(usuario_repo, piu_repo, uow)

    def test_remove_usuario_e_pius(self, remover_service, usuario, usuario_repo, piu_repo):
        piu_repo.create(usuario_id=usuario.id, texto="um", likes=0)
        piu_repo.create(usuario_id=usuario.id, texto="dois", likes=0)
        alheio = piu_repo.create(usuario_id="outro", texto="três", likes=0)

        assert remover_service.execute(usuario.id) is True

        assert usuario_repo.get_by_id(usuario.id) is None
        assert piu_repo.list_by_usuario(usuario.id) == []
        assert piu_repo.list_all() == [alheio]

    def test_libera_campos_unicos(self, remover_service, criar_service, usuario, usuario_data):
        remover_service.execute(usuario.id)

        result = criar_service.execute(CriarUsuarioInputDTO(**usuario_data))

        assert result.is_ok

    def test_usuario_inexistente(self, remover_service, piu_repo):
        piu_repo.create(usuario_id="fantasma", texto="oi", likes=0)

        assert remover_service.execute("fantasma") is False
        assert piu_repo.count() == 1


# =============================================================================
# Leitura
# =============================================================================

class TestLeituraUsuarios:

    def test_listar_em_ordem(self, criar_service, usuario, outro_usuario_data, usuario_repo):
        criar_service.execute(CriarUsuarioInputDTO(**outro_usuario_data)).unwrap()

        usuarios = ListarUsuariosService(usuario_repo).execute()

        assert [u.username for u in usuarios] == ["ana", "bruno"]

    def test_obter(self, usuario, usuario_repo):
        result = ObterUsuarioService(usuario_repo).execute(usuario.id)

        assert result.value == usuario

    def test_obter_inexistente(self, usuario_repo):
        result = ObterUsuarioService(usuario_repo).execute("nada")

        assert result.error.message == "Usuário não encontrado"

    def test_output_to_dict_usa_chaves_publicas(self, usuario):
        dados = usuario.to_dict()

        assert set(dados) == {
            "id", "username", "email", "name", "birth", "cpf",
            "phone", "about", "createdAt", "updatedAt",
        }
        assert dados["birth"] == "1990-01-01"
