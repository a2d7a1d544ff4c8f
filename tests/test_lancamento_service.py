from decimal import Decimal
from unittest import mock

import pytest

from application.lancamento.filtro import FiltroLancamento
from application.lancamento.interface import LancamentoRepositoryPort
from application.lancamento.service import LancamentoService
from core.entities import Lancamento
from core.enums import StatusLancamento, TipoLancamento
from core.exceptions import PreconditionError, RegraNegocioException
from core.shared.entities import gerar_identificador

from conftest import criar_lancamento


@pytest.fixture
def repository():
    return mock.create_autospec(LancamentoRepositoryPort, instance=True)


@pytest.fixture
def service(repository):
    return LancamentoService(repository)


def test_deve_salvar_um_lancamento_como_pendente(service, repository):
    lancamento = criar_lancamento()
    repository.salvar_lancamento.side_effect = lambda l: (l.atribuir_identidade(), l)[1]

    salvo = service.salvar(lancamento)

    assert salvo.id is not None
    assert salvo.status is StatusLancamento.PENDENTE
    repository.salvar_lancamento.assert_called_once_with(lancamento)


def test_salvar_ignora_status_informado(service, repository):
    lancamento = criar_lancamento()
    lancamento.status = StatusLancamento.CANCELADO
    repository.salvar_lancamento.return_value = lancamento

    assert service.salvar(lancamento).status is StatusLancamento.PENDENTE


def test_nao_deve_salvar_quando_houver_erro_de_validacao(service, repository):
    lancamento = criar_lancamento()
    lancamento.descricao = ""

    with pytest.raises(RegraNegocioException, match="invalid description"):
        service.salvar(lancamento)
    repository.salvar_lancamento.assert_not_called()


def test_deve_atualizar_um_lancamento(service, repository):
    lancamento = criar_lancamento()
    lancamento.id = gerar_identificador()
    lancamento.status = StatusLancamento.PENDENTE
    repository.salvar_lancamento.return_value = lancamento

    atualizado = service.atualizar(lancamento)

    assert atualizado is lancamento
    assert atualizado.updated_at is not None
    repository.salvar_lancamento.assert_called_once_with(lancamento)


def test_deve_lancar_erro_ao_atualizar_lancamento_ainda_nao_salvo(service, repository):
    lancamento = criar_lancamento()

    with pytest.raises(PreconditionError):
        service.atualizar(lancamento)
    repository.salvar_lancamento.assert_not_called()


def test_atualizar_valida_antes_de_persistir(service, repository):
    lancamento = criar_lancamento()
    lancamento.id = gerar_identificador()
    lancamento.mes = 13

    with pytest.raises(RegraNegocioException, match="invalid month"):
        service.atualizar(lancamento)
    repository.salvar_lancamento.assert_not_called()


def test_deve_deletar_um_lancamento(service, repository):
    lancamento = criar_lancamento()
    lancamento.id = gerar_identificador()

    service.deletar(lancamento)

    repository.deletar_lancamento.assert_called_once_with(lancamento)


def test_deve_lancar_erro_ao_deletar_lancamento_ainda_nao_salvo(service, repository):
    lancamento = criar_lancamento()

    with pytest.raises(PreconditionError):
        service.deletar(lancamento)
    repository.deletar_lancamento.assert_not_called()


def test_erro_de_pre_condicao_nao_e_regra_de_negocio(service):
    with pytest.raises(PreconditionError) as erro:
        service.deletar(criar_lancamento())
    assert not isinstance(erro.value, RegraNegocioException)


def test_deve_filtrar_lancamentos_pelos_campos_informados(service, repository):
    lancamento = criar_lancamento()
    lancamento.id = gerar_identificador()
    repository.buscar_por_filtro.return_value = [lancamento]

    resultado = service.buscar(lancamento)

    assert resultado == [lancamento]
    filtro = repository.buscar_por_filtro.call_args.args[0]
    assert filtro == FiltroLancamento(
        descricao="Salário",
        mes=1,
        ano=2018,
        usuario_id=lancamento.usuario.id,
        tipo=TipoLancamento.RECEITA,
    )


def test_buscar_aceita_filtro_explicito(service, repository):
    repository.buscar_por_filtro.return_value = []
    filtro = FiltroLancamento(ano=2020)

    assert service.buscar(filtro) == []
    repository.buscar_por_filtro.assert_called_once_with(filtro)


def test_deve_atualizar_o_status_de_um_lancamento(service):
    lancamento = criar_lancamento()
    lancamento.id = gerar_identificador()
    lancamento.status = StatusLancamento.PENDENTE

    with mock.patch.object(LancamentoService, "atualizar", autospec=True, return_value=lancamento) as atualizar:
        service.atualizar_status(lancamento, StatusLancamento.EFETIVADO)

    assert lancamento.status is StatusLancamento.EFETIVADO
    atualizar.assert_called_once_with(service, lancamento)


def test_atualizar_status_persiste_o_novo_status(service, repository):
    lancamento = criar_lancamento()
    lancamento.id = gerar_identificador()
    repository.salvar_lancamento.side_effect = lambda l: l

    atualizado = service.atualizar_status(lancamento, StatusLancamento.CANCELADO)

    assert atualizado.status is StatusLancamento.CANCELADO
    repository.salvar_lancamento.assert_called_once_with(lancamento)


def test_deve_obter_um_lancamento_por_id(service, repository):
    lancamento_id = gerar_identificador()
    lancamento = criar_lancamento()
    lancamento.id = lancamento_id
    repository.obter_por_id.return_value = lancamento

    assert service.obter_por_id(lancamento_id) is lancamento


def test_deve_retornar_vazio_quando_o_lancamento_nao_existe(service, repository):
    repository.obter_por_id.return_value = None

    assert service.obter_por_id(gerar_identificador()) is None


def test_saldo_e_receitas_menos_despesas(service, repository):
    saldos = {TipoLancamento.RECEITA: Decimal("1500.00"), TipoLancamento.DESPESA: Decimal("400.50")}
    repository.obter_saldo_por_tipo_e_usuario.side_effect = lambda _id, tipo: saldos[tipo]

    assert service.obter_saldo_por_usuario(gerar_identificador()) == Decimal("1099.50")


def test_saldo_sem_lancamentos_e_zero(service, repository):
    repository.obter_saldo_por_tipo_e_usuario.return_value = None

    saldo = service.obter_saldo_por_usuario(gerar_identificador())

    assert saldo == Decimal("0")
    assert isinstance(saldo, Decimal)


def test_saldo_so_com_despesas_e_negativo(service, repository):
    saldos = {TipoLancamento.RECEITA: None, TipoLancamento.DESPESA: Decimal("80.00")}
    repository.obter_saldo_por_tipo_e_usuario.side_effect = lambda _id, tipo: saldos[tipo]

    assert service.obter_saldo_por_usuario(gerar_identificador()) == Decimal("-80.00")


def test_cenario_salario_e_salvo_como_pendente(service, repository):
    repository.salvar_lancamento.side_effect = lambda l: l
    lancamento = Lancamento.criar("Salary", 1, 2018, 1000, "RECEITA", usuario=criar_lancamento().usuario)

    assert service.salvar(lancamento).status is StatusLancamento.PENDENTE
