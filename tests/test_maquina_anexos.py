"""
Tests dos anexos da máquina (catálogo de peças / códigos de erro)
"""
import os

import pytest

from app import create_app, db
from app.config import TestConfig
from app.services.armazenamento import nome_arquivo_de_url
from tests.conftest import dados_maquina, arquivo


def formulario(arquivos=None, **extra):
    """Form multipart: campos como texto + arquivos."""
    dados = {k: str(v) for k, v in dados_maquina(**extra).items()}
    dados.update(arquivos or {})
    return dados


def criar(client, arquivos=None, **extra):
    resp = client.post('/api/maquinas', data=formulario(arquivos, **extra),
                       content_type='multipart/form-data')
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def arquivos_no_disco(storage_dir):
    return sorted(
        os.path.relpath(os.path.join(raiz, nome), storage_dir)
        for raiz, _, nomes in os.walk(storage_dir) for nome in nomes
    )


class TestUploadNaCriacao:
    def test_cria_com_catalogo(self, client):
        maquina = criar(client, {'parts_catalog': arquivo(b'catalogo v1', 'catalogo.pdf')})

        url = maquina['parts_catalog_url']
        assert url.startswith(f"/arquivos/equipment_files/{maquina['id']}/partsCatalog_catalogo.pdf?token=")
        assert maquina['error_codes_url'] is None

        download = client.get(url)
        assert download.status_code == 200
        assert download.data == b'catalogo v1'

    def test_cria_com_os_dois_arquivos(self, client):
        maquina = criar(client, {
            'parts_catalog': arquivo(b'pecas', 'pecas.pdf'),
            'error_codes': arquivo(b'codigos', 'codigos.pdf'),
        })
        assert maquina['parts_catalog_url'] != maquina['error_codes_url']
        assert client.get(maquina['error_codes_url']).data == b'codigos'

    def test_nome_de_arquivo_seguro(self, client):
        maquina = criar(client, {'parts_catalog': arquivo(b'x', '../../Catálogo Toyota.pdf')})
        assert '/partsCatalog_Catalogo_Toyota.pdf?' in maquina['parts_catalog_url']
        assert nome_arquivo_de_url(maquina['parts_catalog_url']) == 'Catalogo_Toyota.pdf'

    def test_token_errado_nao_resolve(self, client):
        maquina = criar(client, {'parts_catalog': arquivo()})
        caminho = maquina['parts_catalog_url'].split('?')[0]
        assert client.get(caminho).status_code == 404
        assert client.get(caminho + '?token=000').status_code == 404


class TestSubstituicao:
    def test_adiciona_catalogo_na_edicao(self, client):
        maquina = criar(client)
        resp = client.put(f"/api/maquinas/{maquina['id']}",
                          data=formulario({'parts_catalog': arquivo(b'novo')}),
                          content_type='multipart/form-data')
        assert resp.status_code == 200
        editada = resp.get_json()
        assert editada['parts_catalog_url'] is not None
        assert editada['parts_catalog_url'] != editada['error_codes_url']

        # Leitura repetida devolve a mesma URL
        relida = client.get(f"/api/maquinas/{maquina['id']}").get_json()
        assert relida['parts_catalog_url'] == editada['parts_catalog_url']
        assert client.get('/api/maquinas').get_json()[0]['parts_catalog_url'] == editada['parts_catalog_url']

    def test_substituir_invalida_url_antiga(self, client):
        maquina = criar(client, {'parts_catalog': arquivo(b'versao 1', 'catalogo.pdf')})
        antiga = maquina['parts_catalog_url']

        editada = client.put(f"/api/maquinas/{maquina['id']}",
                             data=formulario({'parts_catalog': arquivo(b'versao 2', 'catalogo.pdf')}),
                             content_type='multipart/form-data').get_json()
        nova = editada['parts_catalog_url']

        assert nova != antiga
        assert client.get(antiga).status_code == 404
        assert client.get(nova).data == b'versao 2'

    def test_substituir_com_outro_nome_remove_arquivo_antigo(self, client, storage_dir):
        maquina = criar(client, {'parts_catalog': arquivo(b'v1', 'antigo.pdf')})
        client.put(f"/api/maquinas/{maquina['id']}",
                   data=formulario({'parts_catalog': arquivo(b'v2', 'novo.pdf')}),
                   content_type='multipart/form-data')
        assert arquivos_no_disco(storage_dir) == [
            os.path.join('equipment_files', maquina['id'], 'partsCatalog_novo.pdf')
        ]

    def test_edicao_sem_arquivo_mantem_url(self, client):
        maquina = criar(client, {'error_codes': arquivo(b'codigos')})
        editada = client.put(f"/api/maquinas/{maquina['id']}",
                             json=dados_maquina(model='Outro Modelo')).get_json()
        assert editada['error_codes_url'] == maquina['error_codes_url']
        assert client.get(editada['error_codes_url']).status_code == 200


class TestRemoverAnexo:
    def test_remove_arquivo_e_zera_url(self, client, storage_dir):
        maquina = criar(client, {
            'parts_catalog': arquivo(b'pecas'),
            'error_codes': arquivo(b'codigos', 'codigos.pdf'),
        })
        resp = client.delete(f"/api/maquinas/{maquina['id']}/anexos/partsCatalog")
        assert resp.status_code == 200
        atualizada = resp.get_json()
        assert atualizada['parts_catalog_url'] is None
        assert atualizada['error_codes_url'] == maquina['error_codes_url']
        assert client.get(maquina['parts_catalog_url']).status_code == 404
        assert arquivos_no_disco(storage_dir) == [
            os.path.join('equipment_files', maquina['id'], 'errorCodes_codigos.pdf')
        ]

    def test_tipo_invalido(self, client):
        maquina = criar(client)
        resp = client.delete(f"/api/maquinas/{maquina['id']}/anexos/manual")
        assert resp.status_code == 422
        assert 'tipo' in resp.get_json()['campos']

    def test_maquina_inexistente(self, client):
        resp = client.delete('/api/maquinas/nao-existe/anexos/errorCodes')
        assert resp.status_code == 404


class TestExcluirComAnexos:
    def test_exclusao_remove_arquivos(self, client, storage_dir):
        maquina = criar(client, {
            'parts_catalog': arquivo(b'pecas'),
            'error_codes': arquivo(b'codigos', 'codigos.pdf'),
        })
        resp = client.delete(f"/api/maquinas/{maquina['id']}?confirmar=true")
        assert resp.status_code == 200
        assert client.get(maquina['parts_catalog_url']).status_code == 404
        assert client.get(maquina['error_codes_url']).status_code == 404
        assert arquivos_no_disco(storage_dir) == []
        assert client.get('/api/maquinas').get_json() == []

    def test_falha_no_storage_nao_impede_exclusao(self, client, servicos, monkeypatch, caplog):
        maquina = criar(client, {'parts_catalog': arquivo(b'pecas')})

        def falhar(url):
            raise OSError('disco somente leitura')

        monkeypatch.setattr(servicos.armazenamento, 'excluir', falhar)
        with caplog.at_level('WARNING', logger='goldmaq'):
            resp = client.delete(f"/api/maquinas/{maquina['id']}?confirmar=true")

        assert resp.status_code == 200
        assert client.get('/api/maquinas').get_json() == []
        assert any('disco somente leitura' in r.getMessage() for r in caplog.records)


class TestFalhaDeUpload:
    def test_erro_de_disco_vira_erro_de_mutacao(self, client, servicos, monkeypatch):
        def falhar(caminho, arquivo):
            raise OSError('sem espaço')

        monkeypatch.setattr(servicos.armazenamento, 'enviar', falhar)
        resp = client.post('/api/maquinas', data=formulario({'parts_catalog': arquivo()}),
                           content_type='multipart/form-data')
        assert resp.status_code == 500
        corpo = resp.get_json()
        assert corpo['code'] == 'MUTATION_FAILED'
        assert corpo['error'].startswith('Não foi possível criar Toyota 8FGCU25. Detalhe:')
        assert client.get('/api/maquinas').get_json() == []


@pytest.mark.parametrize('url, esperado', [
    ('/arquivos/equipment_files/abc/partsCatalog_manual.pdf?token=123', 'manual.pdf'),
    ('/arquivos/equipment_files/abc/errorCodes_codigos_erro.xlsx', 'codigos_erro.xlsx'),
    ('/arquivos/equipment_files/abc/partsCatalog_Cat%C3%A1logo.pdf?token=1', 'Catálogo.pdf'),
    ('/arquivos/equipment_files/abc/', 'arquivo'),
    ('', 'arquivo'),
    (None, 'arquivo'),
])
def test_nome_arquivo_de_url(url, esperado):
    assert nome_arquivo_de_url(url) == esperado


class TestUrlPublicaConfiguravel:
    @pytest.fixture
    def client_files(self, storage_dir):
        app = create_app(TestConfig, STORAGE_ROOT=str(storage_dir),
                         STORAGE_PUBLIC_URL='http://arquivos.goldmaq.local/files/')
        with app.app_context():
            db.create_all()
            yield app.test_client()
            db.session.remove()
            db.drop_all()

    def test_download_pelo_prefixo_configurado(self, client_files):
        maquina = criar(client_files, {'parts_catalog': arquivo(b'manual', 'manual.pdf')})
        url = maquina['parts_catalog_url']
        assert url.startswith('http://arquivos.goldmaq.local/files/equipment_files/')

        download = client_files.get(url)
        assert download.status_code == 200
        assert download.data == b'manual'
        assert client_files.get(url.replace('/files/', '/arquivos/')).status_code == 404

    def test_remover_anexo_com_prefixo_configurado(self, client_files, storage_dir):
        maquina = criar(client_files, {'parts_catalog': arquivo()})
        resp = client_files.delete(f"/api/maquinas/{maquina['id']}/anexos/partsCatalog")
        assert resp.status_code == 200
        assert arquivos_no_disco(storage_dir) == []
        assert client_files.get(maquina['parts_catalog_url']).status_code == 404
