"""
Tests dos filtros das listas
"""
from app.services.filtros import filtrar, filtrar_maquinas

MAQUINAS = [
    {'id': '1', 'brand': 'Toyota', 'fleet_number': 'GM-01', 'operational_status': 'Disponível', 'customer_id': None},
    {'id': '2', 'brand': 'Hyster', 'fleet_number': 'GM-02', 'operational_status': 'Locada', 'customer_id': 'c1'},
    {'id': '3', 'brand': 'TOYOTA', 'fleet_number': None, 'operational_status': 'Locada', 'customer_id': 'c2'},
    {'id': '4', 'brand': 'Yale', 'fleet_number': 'toy-99', 'operational_status': 'Sucata', 'customer_id': 'c1'},
]


def ids(lista):
    return [m['id'] for m in lista]


class TestFiltrarMaquinas:
    def test_sem_filtros(self):
        assert ids(filtrar_maquinas(MAQUINAS)) == ['1', '2', '3', '4']

    def test_busca_sem_diferenciar_maiusculas(self):
        assert ids(filtrar_maquinas(MAQUINAS, busca='toyota')) == ['1', '3']

    def test_busca_no_numero_de_frota(self):
        assert ids(filtrar_maquinas(MAQUINAS, busca='TOY')) == ['1', '3', '4']
        assert ids(filtrar_maquinas(MAQUINAS, busca='gm-02')) == ['2']

    def test_status(self):
        assert ids(filtrar_maquinas(MAQUINAS, status='Disponível')) == ['1']
        assert ids(filtrar_maquinas(MAQUINAS, status='all')) == ['1', '2', '3', '4']

    def test_cliente(self):
        assert ids(filtrar_maquinas(MAQUINAS, cliente='c1')) == ['2', '4']
        assert ids(filtrar_maquinas(MAQUINAS, cliente='unlinked')) == ['1']
        assert ids(filtrar_maquinas(MAQUINAS, cliente='all')) == ['1', '2', '3', '4']

    def test_combinados(self):
        assert ids(filtrar_maquinas(MAQUINAS, busca='toyota', status='Locada', cliente='c2')) == ['3']
        assert filtrar_maquinas(MAQUINAS, busca='toyota', cliente='c1') == []


class TestFiltrarGenerico:
    def test_campos(self):
        lista = [{'name': 'Ana', 'employee_id': 'T-1'}, {'name': 'Bruno', 'employee_id': 'T-2'}]
        assert filtrar(lista, 't-2', campos=('name', 'employee_id')) == [lista[1]]
        assert filtrar(lista, '  ') == lista
