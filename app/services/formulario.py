"""
Estado do modal de formulário compartilhado por todas as telas.

    FECHADO -> CRIANDO | EDITANDO -> ENVIANDO -> FECHADO (sucesso)
                                            +-> CRIANDO | EDITANDO com erros (falha)

Excluir só a partir de EDITANDO e só com confirmação.
"""
from enum import Enum

from app.utils.error_utils import APIError, ErroValidacao


class EstadoModal(Enum):
    FECHADO = 'fechado'
    CRIANDO = 'criando'
    EDITANDO = 'editando'
    ENVIANDO = 'enviando'


class TransicaoInvalida(RuntimeError):
    pass


class EnvioEmAndamento(TransicaoInvalida):
    """Segundo envio com o primeiro ainda em curso (botão desabilitado na tela)."""


class ModalFormulario:
    def __init__(self, esquema, ao_criar, ao_atualizar, ao_excluir=None):
        self.esquema = esquema
        self.ao_criar = ao_criar
        self.ao_atualizar = ao_atualizar
        self.ao_excluir = ao_excluir
        self.estado = EstadoModal.FECHADO
        self._limpar()

    def _limpar(self):
        self.valores = {}
        self.editando = None
        self.erros = {}
        self.erro_geral = None

    @property
    def aberto(self):
        return self.estado is not EstadoModal.FECHADO

    def abrir_criacao(self, padroes=None):
        if self.ao_criar is None:
            raise TransicaoInvalida('Este formulário não permite criação.')
        self._limpar()
        self.valores = dict(padroes or {})
        self.estado = EstadoModal.CRIANDO

    def abrir_edicao(self, documento):
        self._limpar()
        self.editando = dict(documento)
        self.valores = dict(documento)
        self.estado = EstadoModal.EDITANDO

    def fechar(self):
        self._limpar()
        self.estado = EstadoModal.FECHADO

    def _executar(self, anterior, acao):
        """Roda a mutação; em falha volta ao estado anterior com a anotação do erro."""
        self.estado = EstadoModal.ENVIANDO
        try:
            resultado = acao()
        except ErroValidacao as e:
            self.estado = anterior
            self.erros = e.campos
            return None
        except APIError as e:
            self.estado = anterior
            self.erro_geral = e.message
            return None
        except Exception:
            self.estado = anterior
            raise
        self.fechar()
        return resultado

    def enviar(self, dados=None):
        """
        Valida e envia. Retorna o documento gravado, ou None se ficou aberto com erros.

        Raises:
            EnvioEmAndamento: já existe um envio em curso
            TransicaoInvalida: modal fechado
        """
        if self.estado is EstadoModal.ENVIANDO:
            raise EnvioEmAndamento('Envio já em andamento.')
        if self.estado is EstadoModal.FECHADO:
            raise TransicaoInvalida('Modal fechado.')

        if dados is not None:
            self.valores = dict(dados)
        self.erros = {}
        self.erro_geral = None

        try:
            self.esquema.validar(self.valores)
        except ErroValidacao as e:
            self.erros = e.campos
            return None

        anterior = self.estado
        valores = dict(self.valores)
        if anterior is EstadoModal.CRIANDO:
            return self._executar(anterior, lambda: self.ao_criar(valores))
        return self._executar(anterior, lambda: self.ao_atualizar(self.editando['id'], valores))

    def excluir(self, confirmar):
        """
        Args:
            confirmar: callable sem argumentos; só exclui se retornar True

        Returns:
            bool: True se excluiu
        """
        if self.estado is not EstadoModal.EDITANDO or self.ao_excluir is None:
            raise TransicaoInvalida('Exclusão disponível apenas na edição.')
        if not confirmar():
            return False
        self.erro_geral = None
        id = self.editando['id']
        resultado = self._executar(
            EstadoModal.EDITANDO, lambda: self.ao_excluir(id, confirmado=True) or True
        )
        return bool(resultado)

    def limpar_campo(self, id, campo):
        """Reflete no registro aberto uma alteração feita fora do formulário (ex.: anexo removido)."""
        if self.editando and self.editando.get('id') == id:
            self.editando[campo] = None
            self.valores[campo] = None

    def to_dict(self):
        return {
            'estado': self.estado.value,
            'valores': self.valores,
            'editando_id': self.editando['id'] if self.editando else None,
            'erros': self.erros,
            'erro_geral': self.erro_geral,
        }
