"""
Acesso às coleções: uma tabela por coleção, documentos com id opaco.

Toda leitura passa por `desserializar`, que devolve um Resultado:
documento válido ou o motivo da rejeição. Nada de valores padrão
inventados para documentos malformados.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from app.models.base import gerar_id
from app.utils.error_utils import (
    ErroConexao, ErroDuplicado, ErroReferencia, DocumentoInvalido
)

logger = logging.getLogger('goldmaq')


@dataclass
class Resultado:
    """Resultado da leitura de um documento."""
    documento: Optional[dict] = None
    erro: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.erro is None


def desserializar(registro) -> Resultado:
    problemas = registro.problemas()
    if problemas:
        return Resultado(erro=f"{registro.__tablename__}/{registro.id}: {'; '.join(problemas)}")
    return Resultado(documento=registro.to_dict())


class RepositorioDocumentos:
    """
    Operações de uma coleção.

    Args:
        db: instância Flask-SQLAlchemy
        modelo: classe do modelo (define a tabela/coleção)
        ordenacao: colunas do ORDER BY das listagens
    """

    def __init__(self, db, modelo, ordenacao=()):
        self.db = db
        self.modelo = modelo
        self.ordenacao = tuple(ordenacao)

    @property
    def colecao(self) -> str:
        return self.modelo.__tablename__

    @property
    def colunas(self):
        return [c for c in self.modelo.__table__.columns.keys() if c != 'id']

    def _desfazer(self):
        self.db.session.rollback()

    def listar(self) -> list:
        """Documentos válidos, na ordem da coleção. Malformados são descartados com aviso."""
        try:
            registros = self.modelo.query.order_by(*self.ordenacao).all()
        except OperationalError as e:
            self._desfazer()
            raise ErroConexao(f"Não foi possível carregar {self.colecao}. Detalhe: {e.orig}") from e

        documentos = []
        for registro in registros:
            resultado = desserializar(registro)
            if resultado.ok:
                documentos.append(resultado.documento)
            else:
                logger.warning(f"Documento rejeitado: {resultado.erro}")
        return documentos

    def obter(self, id) -> Optional[dict]:
        """
        Documento pelo id, ou None se não existe.

        Raises:
            DocumentoInvalido: documento armazenado fora do formato
        """
        try:
            registro = self.db.session.get(self.modelo, id)
        except OperationalError as e:
            self._desfazer()
            raise ErroConexao(f"Não foi possível carregar {self.colecao}. Detalhe: {e.orig}") from e
        if registro is None:
            return None
        resultado = desserializar(registro)
        if not resultado.ok:
            logger.warning(f"Documento rejeitado: {resultado.erro}")
            raise DocumentoInvalido(f"Documento inválido em {self.colecao}: {resultado.erro}")
        return resultado.documento

    def existe(self, id) -> bool:
        return self.db.session.get(self.modelo, id) is not None

    def contar(self) -> int:
        try:
            return self.modelo.query.count()
        except OperationalError as e:
            self._desfazer()
            raise ErroConexao(f"Não foi possível carregar {self.colecao}. Detalhe: {e.orig}") from e

    def novo_id(self) -> str:
        return gerar_id()

    def _commit(self):
        try:
            self.db.session.commit()
        except IntegrityError as e:
            self._desfazer()
            raise ErroDuplicado(
                f"Já existe um registro em {self.colecao} com este valor único. Detalhe: {e.orig}"
            ) from e
        except SQLAlchemyError:
            self._desfazer()
            raise

    def gravar(self, id, campos) -> dict:
        """
        Cria ou sobrescreve o documento inteiro.
        Colunas ausentes em `campos` ficam None.
        """
        registro = self.db.session.get(self.modelo, id)
        if registro is None:
            registro = self.modelo(id=id)
            self.db.session.add(registro)
        for coluna in self.colunas:
            setattr(registro, coluna, campos.get(coluna))
        self._commit()
        return registro.to_dict()

    def atualizar_campos(self, id, **campos) -> dict:
        registro = self.db.session.get(self.modelo, id)
        if registro is None:
            raise ErroReferencia(f"Registro {id} não encontrado em {self.colecao}.")
        for coluna, valor in campos.items():
            setattr(registro, coluna, valor)
        self._commit()
        return registro.to_dict()

    def excluir(self, id):
        registro = self.db.session.get(self.modelo, id)
        if registro is None:
            raise ErroReferencia(f"Registro {id} não encontrado em {self.colecao}.")
        self.db.session.delete(registro)
        self._commit()
