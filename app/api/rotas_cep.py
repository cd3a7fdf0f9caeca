from flask import Blueprint, jsonify

from app.services import servicos
from app.utils import handle_errors

cep_bp = Blueprint('cep', __name__, url_prefix='/api/cep')


@cep_bp.route('/<cep>', methods=['GET'])
@handle_errors
def consultar_cep(cep):
    """Endereço do CEP para preencher os formulários de cliente e empresa"""
    return jsonify(servicos().cep.consultar(cep))
