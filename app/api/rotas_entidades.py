"""
API CRUD das entidades simples. Um blueprint por coleção, todos iguais:

    GET    /api/<slug>          lista
    GET    /api/<slug>/<id>     um registro
    POST   /api/<slug>          cria (201)
    PUT    /api/<slug>/<id>     sobrescreve
    DELETE /api/<slug>/<id>?confirmar=true
"""
from flask import Blueprint, jsonify

from app.services import servicos
from app.utils import (
    handle_errors, success_response, log_request, ler_payload, exclusao_confirmada
)

SLUGS = ('clientes', 'tecnicos', 'veiculos', 'ordens-servico', 'equipamentos-auxiliares')


def criar_blueprint(slug):
    bp = Blueprint(slug.replace('-', '_'), __name__, url_prefix=f'/api/{slug}')

    def servico():
        return servicos().entidades()[slug]

    @bp.route('', methods=['GET'])
    @handle_errors
    def listar():
        return jsonify(servico().listar())

    @bp.route('/<id>', methods=['GET'])
    @handle_errors
    def obter(id):
        return jsonify(servico().obter(id))

    @bp.route('', methods=['POST'])
    @handle_errors
    def criar():
        log_request(f'criar_{slug}')
        return jsonify(servico().criar(ler_payload())), 201

    @bp.route('/<id>', methods=['PUT'])
    @handle_errors
    def atualizar(id):
        log_request(f'atualizar_{slug}', id=id)
        return jsonify(servico().atualizar(id, ler_payload()))

    @bp.route('/<id>', methods=['DELETE'])
    @handle_errors
    def excluir(id):
        log_request(f'excluir_{slug}', id=id)
        servico().excluir(id, confirmado=exclusao_confirmada())
        return success_response(data={'id': id}, message='Registro excluído.')

    return bp


def blueprints_entidades():
    return [criar_blueprint(slug) for slug in SLUGS]
