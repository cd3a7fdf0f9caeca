"""
Leitura do corpo das requisições (JSON ou formulário multipart).
"""
from flask import request

from app.utils.error_utils import APIError

CONFIRMACOES = ('true', '1', 'sim', 'yes')


def ler_payload(obrigatorio=True):
    """
    Dict com os dados enviados: JSON se houver, senão os campos do formulário.

    Raises:
        APIError: payload vazio quando obrigatório
    """
    dados = request.get_json(silent=True)
    if dados is None and request.form:
        dados = request.form.to_dict()
    if not isinstance(dados, dict):
        dados = {}
    if obrigatorio and not dados:
        raise APIError('Payload requerido', 400, code='MISSING_PAYLOAD')
    return dados


def exclusao_confirmada():
    """?confirmar=true na URL (ou "confirmar": true no JSON)."""
    valor = request.args.get('confirmar')
    if valor is None:
        valor = (request.get_json(silent=True) or {}).get('confirmar')
    return str(valor).strip().lower() in CONFIRMACOES
