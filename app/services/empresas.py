"""
Configuração das três empresas do grupo.

Não há criação nem exclusão: só leitura e atualização. Ids ainda não
gravados no banco aparecem com os dados iniciais abaixo (sem gravar na leitura).
"""
from app.models.empresa import Empresa
from app.models.opcoes import EMPRESA_IDS
from app.schemas.formularios import EmpresaForm
from app.utils.error_utils import ErroReferencia, falha_de_mutacao, log_operation

_ENDERECO_SEDE = {
    'street': 'RUA ARISTIDES MARIOTTI',
    'number': '290',
    'neighborhood': 'RECANTO QUARTO CENTENARIO',
    'city': 'Jundiai',
    'state': 'SP',
    'cep': '13211-740',
}

EMPRESAS_INICIAIS = {
    'goldmaq': {
        'name': 'Gold Maq',
        'cnpj': '04.325.000/0001-12',
        **_ENDERECO_SEDE,
        'bank_name': 'Banco Alpha',
        'bank_agency': '0001',
        'bank_account': '12345-6',
        'bank_pix_key': 'cnpj@goldmaq.com.br',
    },
    'goldcomercio': {
        'name': 'Gold Comércio',
        'cnpj': '33.521.128/0001-50',
        **_ENDERECO_SEDE,
        'bank_name': 'Banco Beta',
        'bank_agency': '0002',
        'bank_account': '65432-1',
    },
    'goldjob': {
        'name': 'Gold Empilhadeiras',
        'cnpj': '13.311.149/0001-33',
        **_ENDERECO_SEDE,
    },
}


def documento_inicial(empresa_id):
    return Empresa(id=empresa_id, **EMPRESAS_INICIAIS[empresa_id]).to_dict()


class ServicoEmpresas:
    def __init__(self, repositorio, cache):
        self.repositorio = repositorio
        self.cache = cache

    @property
    def colecao(self):
        return self.repositorio.colecao

    def _carregar(self):
        gravadas = {e['id']: e for e in self.repositorio.listar()}
        return [gravadas.get(i) or documento_inicial(i) for i in EMPRESA_IDS]

    def listar(self):
        """Sempre as três empresas, na ordem fixa."""
        return self.cache.obter(self.colecao, self._carregar)

    def obter(self, empresa_id):
        for empresa in self.listar():
            if empresa['id'] == empresa_id:
                return empresa
        raise ErroReferencia(f"Empresa {empresa_id} não encontrada.")

    def atualizar(self, empresa_id, dados):
        """Grava (upsert) a configuração de uma das empresas."""
        if empresa_id not in EMPRESA_IDS:
            raise ErroReferencia(f"Empresa {empresa_id} não encontrada.")
        documento = EmpresaForm.validar(dados).para_documento()
        with falha_de_mutacao(f"atualizar {documento['name']}"):
            atualizada = self.repositorio.gravar(empresa_id, documento)
        self.cache.invalidar(self.colecao)
        log_operation('atualizar_empresa', id=empresa_id)
        return atualizada

    def semear(self):
        """Grava os dados iniciais das empresas que ainda não existem no banco."""
        criadas = []
        for empresa_id in EMPRESA_IDS:
            if not self.repositorio.existe(empresa_id):
                self.repositorio.gravar(empresa_id, EMPRESAS_INICIAIS[empresa_id])
                criadas.append(empresa_id)
        self.cache.invalidar(self.colecao)
        return criadas
