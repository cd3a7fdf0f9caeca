import io
import os

# Nunca usar o .env de desenvolvimento nos testes
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["STORAGE_PUBLIC_URL"] = "/arquivos"

import pytest
from app import create_app, db
from app.config import TestConfig


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "storage"


@pytest.fixture
def app(storage_dir):
    app = create_app(TestConfig, STORAGE_ROOT=str(storage_dir))

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def servicos(app):
    return app.extensions['goldmaq']


def dados_maquina(**extra):
    """Formulário mínimo válido de máquina."""
    dados = {
        'brand': 'Toyota',
        'model': '8FGCU25',
        'chassis_number': 'TY001',
        'equipment_type': 'Empilhadeira Contrabalançada GLP',
        'manufacture_year': 2020,
    }
    dados.update(extra)
    return dados


def dados_cliente(**extra):
    dados = {
        'name': 'Transportes Silva',
        'cnpj': '12.345.678/0001-90',
        'email': 'contato@silva.com.br',
        'street': 'Rua das Flores',
        'number': '100',
        'neighborhood': 'Centro',
        'city': 'Jundiaí',
        'state': 'SP',
        'cep': '13201-000',
    }
    dados.update(extra)
    return dados


def arquivo(conteudo=b'%PDF-1.4 catalogo', nome='catalogo.pdf'):
    """Tupla aceita pelo test client num campo de arquivo multipart."""
    return (io.BytesIO(conteudo), nome)
