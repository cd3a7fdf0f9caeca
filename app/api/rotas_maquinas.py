"""
API de máquinas: CRUD com upload dos anexos (multipart) e remoção de anexo.

Campos de arquivo no multipart: 'parts_catalog' e 'error_codes'.
"""
from flask import Blueprint, jsonify, request

from app.services import servicos
from app.services.maquinas import avisos_propriedade
from app.utils import (
    handle_errors, success_response, log_request, ler_payload, exclusao_confirmada
)

maquinas_bp = Blueprint('maquinas', __name__, url_prefix='/api/maquinas')


def _arquivos():
    return request.files.get('parts_catalog'), request.files.get('error_codes')


def _com_avisos(maquina):
    return {**maquina, 'avisos': avisos_propriedade(maquina)}


@maquinas_bp.route('', methods=['GET'])
@handle_errors
def listar_maquinas():
    """Lista ordenada por marca e modelo"""
    return jsonify(servicos().maquinas.listar())


@maquinas_bp.route('/<id>', methods=['GET'])
@handle_errors
def obter_maquina(id):
    return jsonify(servicos().maquinas.obter(id))


@maquinas_bp.route('', methods=['POST'])
@handle_errors
def criar_maquina():
    catalogo, codigos = _arquivos()
    log_request('criar_maquina', anexos=[a.filename for a in (catalogo, codigos) if a])
    maquina = servicos().maquinas.criar(ler_payload(), catalogo, codigos)
    return jsonify(_com_avisos(maquina)), 201


@maquinas_bp.route('/<id>', methods=['PUT'])
@handle_errors
def atualizar_maquina(id):
    catalogo, codigos = _arquivos()
    log_request('atualizar_maquina', id=id, anexos=[a.filename for a in (catalogo, codigos) if a])
    maquina = servicos().maquinas.atualizar(id, ler_payload(), catalogo, codigos)
    return jsonify(_com_avisos(maquina))


@maquinas_bp.route('/<id>/anexos/<tipo>', methods=['DELETE'])
@handle_errors
def remover_anexo(id, tipo):
    """tipo: partsCatalog | errorCodes"""
    log_request('remover_anexo', id=id, tipo=tipo)
    return jsonify(servicos().maquinas.remover_anexo(id, tipo))


@maquinas_bp.route('/<id>', methods=['DELETE'])
@handle_errors
def excluir_maquina(id):
    """Exclui a máquina e seus arquivos. Requer ?confirmar=true"""
    log_request('excluir_maquina', id=id)
    servicos().maquinas.excluir(id, confirmado=exclusao_confirmada())
    return success_response(data={'id': id}, message='A máquina e seus arquivos foram removidos.')
