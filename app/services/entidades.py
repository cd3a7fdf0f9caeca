"""
CRUD genérico das entidades (clientes, técnicos, veículos, ordens de serviço,
equipamentos auxiliares). Um serviço por coleção, montado em create_app.

Fluxo de toda mutação: validar -> gravar -> invalidar cache.
Falhas de validação nunca chegam ao banco; falhas do banco viram ErroMutacao.
"""
from app.utils.error_utils import (
    ErroReferencia, ConfirmacaoNecessaria, falha_de_mutacao, log_operation
)


class ServicoEntidade:
    """
    Args:
        repositorio: RepositorioDocumentos da coleção
        formulario: classe do formulário (FormularioBase)
        cache: CacheColecoes compartilhado
        rotulo: nome da entidade nas mensagens ("o cliente", "o técnico"...)
        campo_descricao: campo usado para identificar o registro nas mensagens
    """

    def __init__(self, repositorio, formulario, cache, rotulo, campo_descricao='name'):
        self.repositorio = repositorio
        self.formulario = formulario
        self.cache = cache
        self.rotulo = rotulo
        self.campo_descricao = campo_descricao

    @property
    def colecao(self):
        return self.repositorio.colecao

    def descrever(self, documento):
        valor = (documento or {}).get(self.campo_descricao)
        return f"{self.rotulo} {valor}" if valor else self.rotulo

    # --- Leitura ---

    def listar(self):
        return self.cache.obter(self.colecao, self.repositorio.listar)

    def obter(self, id):
        documento = self.cache.obter((self.colecao, id), lambda: self.repositorio.obter(id))
        if documento is None:
            raise ErroReferencia(f"Registro {id} não encontrado.")
        return documento

    def contar(self):
        return len(self.listar())

    # --- Mutações ---

    def validar(self, dados):
        return self.formulario.validar(dados)

    def _exigir_id(self, id):
        if not id:
            raise ErroReferencia(f"Não é possível alterar {self.rotulo}: identificador ausente.")

    def criar(self, dados):
        documento = self.validar(dados).para_documento()
        with falha_de_mutacao(f"criar {self.descrever(documento)}"):
            novo = self.repositorio.gravar(self.repositorio.novo_id(), documento)
        self.cache.invalidar(self.colecao)
        log_operation(f"criar_{self.colecao}", id=novo['id'])
        return novo

    def atualizar(self, id, dados):
        """Sobrescreve o documento inteiro com o formulário."""
        self._exigir_id(id)
        documento = self.validar(dados).para_documento()
        if not self.repositorio.existe(id):
            raise ErroReferencia(f"Registro {id} não encontrado.")
        with falha_de_mutacao(f"atualizar {self.descrever(documento)}"):
            atualizado = self.repositorio.gravar(id, documento)
        self.cache.invalidar(self.colecao)
        log_operation(f"atualizar_{self.colecao}", id=id)
        return atualizado

    def excluir(self, id, confirmado=False):
        """
        Raises:
            ConfirmacaoNecessaria: sem confirmação explícita nada é excluído
        """
        self._exigir_id(id)
        if not confirmado:
            raise ConfirmacaoNecessaria(f"Confirme antes de excluir {self.rotulo}.")
        with falha_de_mutacao(f"excluir {self.rotulo}"):
            self.repositorio.excluir(id)
        self.cache.invalidar(self.colecao)
        log_operation(f"excluir_{self.colecao}", id=id)
