"""
Filtros das listas (busca + selects), aplicados sobre a coleção já carregada.
"""
FILTRO_TODOS = 'all'
FILTRO_SEM_CLIENTE = 'unlinked'


def _contem(valor, termo):
    return termo in str(valor or '').lower()


def filtrar(lista, busca=None, campos=('name',)):
    """Busca sem diferenciar maiúsculas em qualquer um dos campos."""
    termo = (busca or '').strip().lower()
    if not termo:
        return list(lista)
    return [doc for doc in lista if any(_contem(doc.get(c), termo) for c in campos)]


def filtrar_maquinas(lista, busca=None, status=None, cliente=None):
    """
    Args:
        busca: trecho da marca ou do número de frota
        status: status operacional, ou 'all'/None para todos
        cliente: id do cliente, 'unlinked' para sem cliente, 'all'/None para todos
    """
    resultado = filtrar(lista, busca, campos=('brand', 'fleet_number'))
    if status and status != FILTRO_TODOS:
        resultado = [m for m in resultado if m.get('operational_status') == status]
    if cliente == FILTRO_SEM_CLIENTE:
        resultado = [m for m in resultado if not m.get('customer_id')]
    elif cliente and cliente != FILTRO_TODOS:
        resultado = [m for m in resultado if m.get('customer_id') == cliente]
    return resultado
