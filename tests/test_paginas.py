"""
Tests das telas (estado em JSON) e do painel inicial
"""
from datetime import date

from app.utils import ErroConexao
from tests.conftest import dados_cliente, dados_maquina, arquivo


class TestPainel:
    def test_atalhos_com_totais(self, client):
        client.post('/api/clientes', json=dados_cliente())
        client.post('/api/maquinas', json=dados_maquina())
        client.post('/api/maquinas', json=dados_maquina(chassis_number='TY002'))

        painel = client.get('/').get_json()
        totais = {a['rota']: a['total'] for a in painel['atalhos']}
        assert totais['/customers'] == 1
        assert totais['/maquinas'] == 2
        assert totais['/technicians'] == 0
        assert totais['/company-config'] == 3


class TestPaginaMaquinas:
    def test_lista_com_rotulos(self, client):
        cliente = client.post('/api/clientes', json=dados_cliente()).get_json()
        client.post('/api/maquinas', json=dados_maquina(
            chassis_number='A', customer_id=cliente['id'], owner_reference='CUSTOMER_OWNED'
        ))
        client.post('/api/maquinas', json=dados_maquina(chassis_number='B', owner_reference='goldjob'))
        client.post('/api/maquinas', json=dados_maquina(chassis_number='C', owner_reference='CUSTOMER_OWNED'))
        client.post('/api/maquinas', json=dados_maquina(chassis_number='D'))

        tela = client.get('/maquinas').get_json()
        rotulos = {m['chassis_number']: m['proprietario'] for m in tela['registros']}
        assert rotulos == {
            'A': 'Transportes Silva',
            'B': 'Gold Empilhadeiras',
            'C': 'Cliente (Não Vinculado)',
            'D': 'Não Especificado',
        }
        avisos = {m['chassis_number']: m['avisos'] for m in tela['registros']}
        assert avisos['C'] == ['Atenção: Vincule um cliente para esta opção.']
        assert avisos['A'] == []
        assert tela['clientes'] == [{'id': cliente['id'], 'name': 'Transportes Silva'}]
        assert tela['modal']['estado'] == 'fechado'

    def test_cliente_excluido_vira_nao_vinculado(self, client):
        cliente = client.post('/api/clientes', json=dados_cliente()).get_json()
        client.post('/api/maquinas', json=dados_maquina(
            customer_id=cliente['id'], owner_reference='CUSTOMER_OWNED'
        ))
        client.delete(f"/api/clientes/{cliente['id']}?confirmar=true")
        tela = client.get('/maquinas').get_json()
        assert tela['registros'][0]['proprietario'] == 'Cliente (Não Vinculado)'

    def test_abre_maquina_pela_url(self, client):
        maquina = client.post('/api/maquinas', json=dados_maquina()).get_json()
        tela = client.get(f"/maquinas?openMaquinaId={maquina['id']}").get_json()
        assert tela['modal']['estado'] == 'editando'
        assert tela['modal']['editando_id'] == maquina['id']
        assert tela['modal']['valores']['chassis_number'] == 'TY001'

    def test_id_desconhecido_e_ignorado(self, client):
        client.post('/api/maquinas', json=dados_maquina())
        tela = client.get('/equipment?openMaquinaId=nao-existe').get_json()
        assert tela['modal']['estado'] == 'fechado'

    def test_filtros_pela_url(self, client):
        client.post('/api/maquinas', json=dados_maquina(chassis_number='A', fleet_number='GM-01'))
        client.post('/api/maquinas', json=dados_maquina(
            chassis_number='B', brand='Hyster', operational_status='Locada'
        ))
        tela = client.get('/maquinas?q=gm-0&status=all&cliente=unlinked').get_json()
        assert [m['chassis_number'] for m in tela['registros']] == ['A']
        assert tela['total'] == 2

        tela = client.get('/maquinas?status=Locada').get_json()
        assert [m['chassis_number'] for m in tela['registros']] == ['B']

    def test_nomes_dos_anexos(self, client):
        client.post('/api/maquinas', data={
            **{k: str(v) for k, v in dados_maquina().items()},
            'error_codes': arquivo(b'x', 'codigos_2024.pdf'),
        }, content_type='multipart/form-data')
        registro = client.get('/maquinas').get_json()['registros'][0]
        assert registro['anexos']['partsCatalog'] is None
        assert registro['anexos']['errorCodes']['nome'] == 'codigos_2024.pdf'

    def test_remover_anexo_com_modal_aberto(self, client):
        maquina = client.post('/api/maquinas', data={
            **{k: str(v) for k, v in dados_maquina().items()},
            'parts_catalog': arquivo(b'pecas', 'pecas.pdf'),
            'error_codes': arquivo(b'codigos', 'codigos.pdf'),
        }, content_type='multipart/form-data').get_json()

        resp = client.delete(f"/maquinas/{maquina['id']}/anexos/partsCatalog")
        assert resp.status_code == 200
        tela = resp.get_json()
        assert tela['modal']['estado'] == 'editando'
        assert tela['modal']['editando_id'] == maquina['id']
        assert tela['modal']['valores']['parts_catalog_url'] is None
        assert tela['modal']['valores']['error_codes_url'] == maquina['error_codes_url']
        assert tela['registros'][0]['anexos']['partsCatalog'] is None
        assert client.get(maquina['parts_catalog_url']).status_code == 404

    def test_remover_anexo_de_maquina_inexistente(self, client):
        resp = client.delete('/equipment/nao-existe/anexos/errorCodes')
        assert resp.status_code == 404

    def test_valores_padrao_do_formulario(self, client):
        padroes = client.get('/maquinas').get_json()['padroes']
        assert padroes['equipment_type'] == 'Empilhadeira Contrabalançada GLP'
        assert padroes['operational_status'] == 'Disponível'
        assert padroes['manufacture_year'] == date.today().year


class TestOutrasPaginas:
    def test_clientes_com_busca(self, client):
        client.post('/api/clientes', json=dados_cliente(name='Alfa Armazéns'))
        client.post('/api/clientes', json=dados_cliente(name='Beta Logística', email='b@beta.com'))
        tela = client.get('/customers?q=beta').get_json()
        assert [c['name'] for c in tela['registros']] == ['Beta Logística']
        assert tela['total'] == 2

    def test_abrir_registro(self, client):
        tecnico = client.post('/api/tecnicos', json={'name': 'Ana', 'employee_id': 'T-1'}).get_json()
        tela = client.get(f"/technicians?abrir={tecnico['id']}").get_json()
        assert tela['modal']['estado'] == 'editando'

    def test_empresas(self, client):
        tela = client.get('/company-config').get_json()
        assert [e['id'] for e in tela['registros']] == ['goldmaq', 'goldcomercio', 'goldjob']

    def test_todas_as_rotas_respondem(self, client):
        for rota in ('/', '/customers', '/equipment', '/maquinas', '/service-orders',
                     '/technicians', '/vehicles', '/company-config', '/auxiliary-equipment'):
            resp = client.get(rota)
            assert resp.status_code == 200, rota
            assert resp.get_json()['estado'] == 'ok'


class TestErroDeConexao:
    def test_banco_fora_do_ar_vira_tela_de_erro(self, client, servicos, monkeypatch):
        def fora_do_ar():
            raise ErroConexao('Não foi possível carregar clientes. Detalhe: timeout')

        monkeypatch.setattr(servicos.clientes.repositorio, 'listar', fora_do_ar)
        resp = client.get('/customers')
        assert resp.status_code == 503
        corpo = resp.get_json()
        assert corpo['estado'] == 'erro_conexao'
        assert 'timeout' in corpo['error']

    def test_api_responde_503(self, client, servicos, monkeypatch):
        def fora_do_ar():
            raise ErroConexao('Não foi possível carregar equipamentos. Detalhe: timeout')

        monkeypatch.setattr(servicos.maquinas.repositorio, 'listar', fora_do_ar)
        resp = client.get('/api/maquinas')
        assert resp.status_code == 503
        assert resp.get_json()['code'] == 'CONNECTION_UNAVAILABLE'
