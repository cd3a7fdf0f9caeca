"""
Serviço de máquinas: CRUD + anexos (catálogo de peças e códigos de erro)
+ resolução do proprietário.

Upload e gravação do documento são sequenciais, não transacionais:
um upload seguido de falha na gravação deixa arquivo órfão no storage.
"""
import logging

from app.models.opcoes import (
    EMPRESAS, OWNER_REF_CUSTOMER, TIPOS_ANEXO, ROTULOS_ANEXO
)
from app.schemas.formularios import MaquinaForm
from app.services.entidades import ServicoEntidade
from app.utils.error_utils import (
    ErroReferencia, ErroValidacao, ConfirmacaoNecessaria,
    falha_de_mutacao, log_operation
)

logger = logging.getLogger('goldmaq')

NAMESPACE_ARQUIVOS = 'equipment_files'

ROTULO_CLIENTE_NAO_VINCULADO = 'Cliente (Não Vinculado)'
ROTULO_NAO_ESPECIFICADO = 'Não Especificado'
AVISO_SEM_CLIENTE = 'Atenção: Vincule um cliente para esta opção.'


def rotulo_proprietario(owner_reference, customer_id=None, clientes=()):
    """
    Texto de exibição do proprietário.

    Args:
        owner_reference: 'CUSTOMER_OWNED', id de empresa ou None
        customer_id: cliente vinculado à máquina
        clientes: lista de documentos de clientes para achar o nome
    """
    if owner_reference == OWNER_REF_CUSTOMER:
        if customer_id:
            for cliente in clientes:
                if cliente.get('id') == customer_id:
                    return cliente.get('name') or ROTULO_CLIENTE_NAO_VINCULADO
        return ROTULO_CLIENTE_NAO_VINCULADO
    if owner_reference in EMPRESAS:
        return EMPRESAS[owner_reference]
    return ROTULO_NAO_ESPECIFICADO


def avisos_propriedade(documento):
    """Avisos não bloqueantes: propriedade de cliente sem cliente vinculado."""
    if documento.get('owner_reference') == OWNER_REF_CUSTOMER and not documento.get('customer_id'):
        return [AVISO_SEM_CLIENTE]
    return []


class ServicoMaquinas(ServicoEntidade):
    def __init__(self, repositorio, cache, armazenamento):
        super().__init__(repositorio, MaquinaForm, cache, rotulo='a máquina')
        self.armazenamento = armazenamento

    def descrever(self, documento):
        documento = documento or {}
        nome = ' '.join(filter(None, [documento.get('brand'), documento.get('model')]))
        return nome or self.rotulo

    def _enviar(self, maquina_id, tipo, arquivo):
        caminho = self.armazenamento.caminho_para(
            NAMESPACE_ARQUIVOS, maquina_id, tipo, getattr(arquivo, 'filename', None)
        )
        return self.armazenamento.enviar(caminho, arquivo)

    def criar(self, dados, arquivo_catalogo=None, arquivo_codigos=None):
        documento = self.validar(dados).para_documento()
        maquina_id = self.repositorio.novo_id()
        novos = {'partsCatalog': arquivo_catalogo, 'errorCodes': arquivo_codigos}

        with falha_de_mutacao(f"criar {self.descrever(documento)}"):
            for tipo, campo in TIPOS_ANEXO.items():
                arquivo = novos[tipo]
                documento[campo] = self._enviar(maquina_id, tipo, arquivo) if arquivo else None
            nova = self.repositorio.gravar(maquina_id, documento)

        self.cache.invalidar(self.colecao)
        log_operation('criar_maquina', id=maquina_id,
                      anexos=[t for t, a in novos.items() if a])
        return nova

    def atualizar(self, id, dados, arquivo_catalogo=None, arquivo_codigos=None, anterior=None):
        """
        Arquivo novo substitui o anterior (o antigo é apagado antes do upload);
        sem arquivo novo a URL existente é mantida.
        """
        self._exigir_id(id)
        documento = self.validar(dados).para_documento()
        if anterior is None:
            anterior = self.repositorio.obter(id)
        if anterior is None:
            raise ErroReferencia(f"Máquina {id} não encontrada.")
        novos = {'partsCatalog': arquivo_catalogo, 'errorCodes': arquivo_codigos}

        with falha_de_mutacao(f"atualizar {self.descrever(documento)}"):
            for tipo, campo in TIPOS_ANEXO.items():
                arquivo = novos[tipo]
                if arquivo:
                    self.armazenamento.excluir_seguro(anterior.get(campo))
                    documento[campo] = self._enviar(id, tipo, arquivo)
                else:
                    documento[campo] = anterior.get(campo)
            atualizada = self.repositorio.gravar(id, documento)

        self.cache.invalidar(self.colecao)
        log_operation('atualizar_maquina', id=id,
                      anexos=[t for t, a in novos.items() if a])
        return atualizada

    def remover_anexo(self, id, tipo):
        """Apaga o arquivo do tipo informado e zera a URL no documento."""
        campo = TIPOS_ANEXO.get(tipo)
        if campo is None:
            raise ErroValidacao({'tipo': [f"Tipo de anexo inválido: {tipo}."]})
        self._exigir_id(id)
        maquina = self.repositorio.obter(id)
        if maquina is None:
            raise ErroReferencia(f"Máquina {id} não encontrada.")

        with falha_de_mutacao(f"remover o {ROTULOS_ANEXO[tipo]}"):
            self.armazenamento.excluir_seguro(maquina.get(campo))
            atualizada = self.repositorio.atualizar_campos(id, **{campo: None})

        self.cache.invalidar(self.colecao)
        log_operation('remover_anexo', id=id, tipo=tipo)
        return atualizada

    def excluir(self, id, confirmado=False):
        """Apaga os dois anexos (sem falhar) e depois o documento."""
        self._exigir_id(id)
        if not confirmado:
            raise ConfirmacaoNecessaria("Confirme antes de excluir a máquina.")
        maquina = self.repositorio.obter(id)
        if maquina is None:
            raise ErroReferencia(f"Máquina {id} não encontrada.")

        with falha_de_mutacao("excluir a máquina"):
            for campo in TIPOS_ANEXO.values():
                if not self.armazenamento.excluir_seguro(maquina.get(campo)) and maquina.get(campo):
                    log_operation('excluir_anexo', status='warning', id=id, campo=campo)
            self.repositorio.excluir(id)

        self.cache.invalidar(self.colecao)
        log_operation('excluir_maquina', id=id)
