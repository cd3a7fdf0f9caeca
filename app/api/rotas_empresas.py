from flask import Blueprint, jsonify

from app.services import servicos
from app.utils import handle_errors, log_request, ler_payload

empresas_bp = Blueprint('empresas', __name__, url_prefix='/api/empresas')


@empresas_bp.route('', methods=['GET'])
@handle_errors
def listar_empresas():
    """As três empresas do grupo, na ordem fixa"""
    return jsonify(servicos().empresas.listar())


@empresas_bp.route('/<empresa_id>', methods=['GET'])
@handle_errors
def obter_empresa(empresa_id):
    return jsonify(servicos().empresas.obter(empresa_id))


@empresas_bp.route('/<empresa_id>', methods=['PUT'])
@handle_errors
def atualizar_empresa(empresa_id):
    log_request('atualizar_empresa', id=empresa_id)
    return jsonify(servicos().empresas.atualizar(empresa_id, ler_payload()))
