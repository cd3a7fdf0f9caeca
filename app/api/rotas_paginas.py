"""
Telas do sistema. Cada rota devolve o estado da tela em JSON
(lista filtrada + modal). Banco fora do ar -> {estado: 'erro_conexao'} com 503.
"""
from functools import wraps

from flask import Blueprint, jsonify, request

from app.services import servicos
from app.services.paginas import PaginaEntidade, PaginaMaquinas, PaginaEmpresas, painel
from app.utils import ErroConexao, handle_errors, log_request

paginas_bp = Blueprint('paginas', __name__)


def tela(f):
    """Converte falha de conexão no estado de erro de página inteira."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return jsonify(f(*args, **kwargs))
        except ErroConexao as e:
            return jsonify({'estado': 'erro_conexao', 'error': e.message, 'code': e.code}), 503
    return decorated_function


def _abrir_id():
    return request.args.get('abrir') or None


@paginas_bp.route('/', methods=['GET'])
@handle_errors
@tela
def dashboard():
    return painel(servicos())


@paginas_bp.route('/customers', methods=['GET'])
@handle_errors
@tela
def pagina_clientes():
    pagina = PaginaEntidade(servicos().clientes, campos_busca=('name', 'cnpj', 'email'))
    return pagina.estado(request.args.get('q'), _abrir_id())


@paginas_bp.route('/equipment', methods=['GET'])
@paginas_bp.route('/maquinas', methods=['GET'])
@handle_errors
@tela
def pagina_maquinas():
    """?openMaquinaId=<id> abre a máquina direto no modo edição"""
    s = servicos()
    pagina = PaginaMaquinas(s.maquinas, s.clientes)
    return pagina.estado(
        busca=request.args.get('q'),
        status=request.args.get('status'),
        cliente=request.args.get('cliente'),
        abrir_id=request.args.get('openMaquinaId') or _abrir_id(),
    )


@paginas_bp.route('/equipment/<id>/anexos/<tipo>', methods=['DELETE'])
@paginas_bp.route('/maquinas/<id>/anexos/<tipo>', methods=['DELETE'])
@handle_errors
@tela
def remover_anexo_na_tela(id, tipo):
    """Remove o anexo pelo modal de edição; devolve a tela com o modal ainda aberto."""
    log_request('remover_anexo_tela', id=id, tipo=tipo)
    s = servicos()
    pagina = PaginaMaquinas(s.maquinas, s.clientes)
    return pagina.remover_anexo(
        id, tipo,
        busca=request.args.get('q'),
        status=request.args.get('status'),
        cliente=request.args.get('cliente'),
    )


@paginas_bp.route('/service-orders', methods=['GET'])
@handle_errors
@tela
def pagina_ordens():
    pagina = PaginaEntidade(
        servicos().ordens,
        campos_busca=('order_number', 'nature_of_service', 'description'),
        padroes={'phase': 'Pendente', 'estimated_labor_cost': 0},
    )
    return pagina.estado(request.args.get('q'), _abrir_id())


@paginas_bp.route('/technicians', methods=['GET'])
@handle_errors
@tela
def pagina_tecnicos():
    pagina = PaginaEntidade(servicos().tecnicos, campos_busca=('name', 'employee_id', 'specialization'))
    return pagina.estado(request.args.get('q'), _abrir_id())


@paginas_bp.route('/vehicles', methods=['GET'])
@handle_errors
@tela
def pagina_veiculos():
    pagina = PaginaEntidade(
        servicos().veiculos,
        campos_busca=('model', 'license_plate', 'kind'),
        padroes={'status': 'Disponível', 'current_mileage': 0, 'fuel_consumption': 0,
                 'cost_per_kilometer': 0},
    )
    return pagina.estado(request.args.get('q'), _abrir_id())


@paginas_bp.route('/company-config', methods=['GET'])
@handle_errors
@tela
def pagina_empresas():
    return PaginaEmpresas(servicos().empresas).estado(abrir_id=_abrir_id())


@paginas_bp.route('/auxiliary-equipment', methods=['GET'])
@handle_errors
@tela
def pagina_auxiliares():
    pagina = PaginaEntidade(
        servicos().auxiliares,
        campos_busca=('name', 'type', 'serial_number'),
        padroes={'type': 'Bateria', 'status': 'Disponível'},
    )
    return pagina.estado(request.args.get('q'), _abrir_id())
