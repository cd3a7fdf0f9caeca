"""
Armazenamento de arquivos em disco local com metadados no banco.

Caminho: {namespace}/{entidade_id}/{tipo}_{nome_seguro}
URL pública: {STORAGE_PUBLIC_URL}/{caminho}?token={token}

Cada upload gera um token novo; a URL antiga para de resolver
mesmo que o caminho seja o mesmo.
"""
import hashlib
import logging
import mimetypes
import os
import secrets
from urllib.parse import quote, unquote, urlsplit, parse_qs

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.utils import secure_filename

from app.models.objeto_armazenado import ObjetoArmazenado
from app.utils.error_utils import ErroConexao, log_operation

logger = logging.getLogger('goldmaq')

NOME_PADRAO = 'arquivo'


def nome_arquivo_de_url(url):
    """
    Nome do arquivo para exibição a partir da URL salva no documento.
    Remove query string e o prefixo "{tipo}_".
    """
    if not url:
        return NOME_PADRAO
    caminho = unquote(str(url)).split('?')[0]
    ultimo = caminho.split('/')[-1]
    nome = ultimo[ultimo.find('_') + 1:]
    return nome or NOME_PADRAO


class ArmazenamentoArquivos:
    def __init__(self, raiz, url_publica, db):
        self.raiz = os.path.abspath(raiz)
        self.url_publica = url_publica.rstrip('/')
        self.db = db
        try:
            os.makedirs(self.raiz, exist_ok=True)
        except OSError as e:
            raise ErroConexao(f"Storage inacessível em {self.raiz}. Detalhe: {e}") from e

    # --- Caminhos e URLs ---

    @staticmethod
    def caminho_para(namespace, entidade_id, tipo, nome_arquivo):
        nome = secure_filename(nome_arquivo or '') or NOME_PADRAO
        return f"{namespace}/{entidade_id}/{tipo}_{nome}"

    @property
    def prefixo_rota(self):
        """Caminho da URL pública onde a rota de download é montada (ex.: '/arquivos')."""
        return urlsplit(self.url_publica).path.rstrip('/')

    def url_para(self, caminho, token):
        return f"{self.url_publica}/{quote(caminho)}?token={token}"

    def caminho_de_url(self, url):
        """
        (caminho, token) de uma URL gerada por este storage.

        Raises:
            ValueError: URL de outro storage
        """
        partes = urlsplit(url)
        prefixo = self.prefixo_rota + '/'
        if not partes.path.startswith(prefixo):
            raise ValueError(f"URL fora do storage: {url}")
        caminho = unquote(partes.path[len(prefixo):])
        token = parse_qs(partes.query).get('token', [None])[0]
        return caminho, token

    def _absoluto(self, caminho):
        destino = os.path.abspath(os.path.join(self.raiz, caminho))
        if os.path.commonpath([self.raiz, destino]) != self.raiz:
            raise ValueError(f"Caminho inválido: {caminho}")
        return destino

    # --- Operações ---

    def enviar(self, caminho, arquivo):
        """
        Grava o arquivo (FileStorage ou file-like) e devolve a URL pública.
        Sobrescreve o que houver no mesmo caminho.
        """
        conteudo = arquivo.read()
        destino = self._absoluto(caminho)
        os.makedirs(os.path.dirname(destino), exist_ok=True)
        with open(destino, 'wb') as f:
            f.write(conteudo)

        mime = getattr(arquivo, 'mimetype', None) or mimetypes.guess_type(caminho)[0]
        objeto = self.db.session.get(ObjetoArmazenado, caminho)
        if objeto is None:
            objeto = ObjetoArmazenado(path=caminho)
            self.db.session.add(objeto)
        objeto.token = secrets.token_hex(16)
        objeto.mime = mime or 'application/octet-stream'
        objeto.size_bytes = len(conteudo)
        objeto.sha256 = hashlib.sha256(conteudo).hexdigest()
        try:
            self.db.session.commit()
        except SQLAlchemyError:
            self.db.session.rollback()
            raise

        log_operation('enviar_arquivo', caminho=caminho, bytes=len(conteudo))
        return self.url_para(caminho, objeto.token)

    def abrir(self, caminho, token):
        """
        (arquivo_absoluto, mime) se o caminho existe e o token confere; senão None.
        """
        objeto = self.db.session.get(ObjetoArmazenado, caminho)
        if objeto is None or not token or not secrets.compare_digest(objeto.token, token):
            return None
        try:
            destino = self._absoluto(caminho)
        except ValueError:
            return None
        if not os.path.isfile(destino):
            return None
        return destino, objeto.mime

    def existe(self, url):
        try:
            caminho, token = self.caminho_de_url(url)
        except ValueError:
            return False
        return self.abrir(caminho, token) is not None

    def excluir(self, url):
        """Remove arquivo e metadados da URL. Erros de disco/banco sobem."""
        caminho, _ = self.caminho_de_url(url)
        destino = self._absoluto(caminho)
        if os.path.exists(destino):
            os.remove(destino)
        objeto = self.db.session.get(ObjetoArmazenado, caminho)
        if objeto is not None:
            self.db.session.delete(objeto)
            try:
                self.db.session.commit()
            except SQLAlchemyError:
                self.db.session.rollback()
                raise
        log_operation('excluir_arquivo', caminho=caminho)

    def excluir_seguro(self, url):
        """
        Exclusão sem falhar: um arquivo que não sai do storage
        não impede a operação principal. Retorna True se removeu.
        """
        if not url:
            return False
        try:
            self.excluir(url)
            return True
        except (OSError, SQLAlchemyError, ValueError) as e:
            logger.warning(f"[EXCLUIR ARQUIVO] Falha ao remover {url}: {e}")
            return False
