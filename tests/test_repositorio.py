"""
Tests do repositório de documentos
"""
import pytest
from sqlalchemy.exc import OperationalError

from app import db
from app.models import Tecnico, Veiculo
from app.services.repositorio import RepositorioDocumentos, desserializar
from app.utils import ErroConexao, ErroReferencia, DocumentoInvalido


@pytest.fixture
def repo(app):
    return RepositorioDocumentos(db, Tecnico, (Tecnico.name,))


class TestGravar:
    def test_cria_com_id_informado(self, repo):
        id = repo.novo_id()
        doc = repo.gravar(id, {'name': 'Ana', 'employee_id': 'T-1'})
        assert doc == {'id': id, 'name': 'Ana', 'employee_id': 'T-1', 'specialization': None}
        assert repo.existe(id)

    def test_sobrescreve_tudo(self, repo):
        id = repo.novo_id()
        repo.gravar(id, {'name': 'Ana', 'employee_id': 'T-1', 'specialization': 'Hidráulica'})
        doc = repo.gravar(id, {'name': 'Ana', 'employee_id': 'T-9'})
        assert doc['specialization'] is None
        assert doc['employee_id'] == 'T-9'

    def test_ids_unicos(self, repo):
        assert repo.novo_id() != repo.novo_id()

    def test_atualizar_campos(self, repo):
        id = repo.novo_id()
        repo.gravar(id, {'name': 'Ana', 'employee_id': 'T-1', 'specialization': 'Elétrica'})
        doc = repo.atualizar_campos(id, specialization=None)
        assert doc['specialization'] is None
        assert doc['name'] == 'Ana'

    def test_excluir_inexistente(self, repo):
        with pytest.raises(ErroReferencia):
            repo.excluir('nao-existe')


class TestDesserializar:
    def test_documento_valido(self, app):
        resultado = desserializar(Veiculo(
            id='v1', model='Strada', license_plate='ABC1D23', kind='Utilitário',
            current_mileage=10.0, fuel_consumption=11.0, cost_per_kilometer=0.5, status='Em Uso'
        ))
        assert resultado.ok
        assert resultado.documento['status'] == 'Em Uso'

    def test_tipo_numerico_errado(self, app):
        resultado = desserializar(Veiculo(
            id='v1', model='Strada', license_plate='ABC1D23', kind='Utilitário',
            current_mileage='muito', fuel_consumption=11.0, cost_per_kilometer=0.5, status='Em Uso'
        ))
        assert not resultado.ok
        assert 'current_mileage' in resultado.erro
        assert resultado.documento is None

    def test_obter_malformado(self, app):
        repo = RepositorioDocumentos(db, Veiculo)
        db.session.add(Veiculo(
            id='v1', model='Strada', license_plate='ABC1D23', kind='Utilitário', status='Vendido'
        ))
        db.session.commit()
        with pytest.raises(DocumentoInvalido):
            repo.obter('v1')
        assert repo.listar() == []


class ConsultaForaDoAr:
    def order_by(self, *args):
        return self

    def all(self):
        raise OperationalError('SELECT 1', {}, Exception('conexão recusada'))


class ModeloForaDoAr:
    __tablename__ = 'tecnicos'
    query = ConsultaForaDoAr()


class TestConexao:
    def test_listar_sem_banco(self, app):
        repo = RepositorioDocumentos(db, ModeloForaDoAr)
        with pytest.raises(ErroConexao) as exc:
            repo.listar()
        assert exc.value.status_code == 503
        assert 'conexão recusada' in exc.value.message
