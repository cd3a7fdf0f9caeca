"""
Download dos arquivos do storage local pela URL pública (com token).
O prefixo da rota vem de STORAGE_PUBLIC_URL (registrado em create_app).
"""
from flask import Blueprint, abort, request, send_file

from app.services import servicos

arquivos_bp = Blueprint('arquivos', __name__)


@arquivos_bp.route('/<path:caminho>', methods=['GET'])
def baixar_arquivo(caminho):
    """URL com token antigo ou de arquivo apagado -> 404"""
    encontrado = servicos().armazenamento.abrir(caminho, request.args.get('token'))
    if encontrado is None:
        abort(404)
    destino, mime = encontrado
    return send_file(destino, mimetype=mime)
