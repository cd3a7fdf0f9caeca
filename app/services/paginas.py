"""
Estado de cada tela (lista filtrada + modal), servido em JSON pelas rotas de página.
"""
from datetime import date

from app.models.opcoes import (
    MAQUINA_STATUS_OPCOES, MAQUINA_STATUS_PADRAO, MARCAS_MAQUINA, TIPOS_MAQUINA,
    TIPOS_ANEXO, EMPRESAS, OWNER_REF_CUSTOMER,
)
from app.schemas.formularios import EmpresaForm
from app.services.armazenamento import nome_arquivo_de_url
from app.services.filtros import filtrar, filtrar_maquinas
from app.services.formulario import ModalFormulario
from app.services.maquinas import rotulo_proprietario, avisos_propriedade

# Atalhos do painel inicial: (título, rota, atributo em Servicos)
ATALHOS = (
    ('Clientes', '/customers', 'clientes'),
    ('Máquinas', '/maquinas', 'maquinas'),
    ('Equipamentos Auxiliares', '/auxiliary-equipment', 'auxiliares'),
    ('Ordens de Serviço', '/service-orders', 'ordens'),
    ('Técnicos', '/technicians', 'tecnicos'),
    ('Veículos', '/vehicles', 'veiculos'),
    ('Configuração das Empresas', '/company-config', 'empresas'),
)


def painel(servicos):
    """Atalhos para cada tela com o total de registros."""
    return {
        'estado': 'ok',
        'atalhos': [
            {'titulo': titulo, 'rota': rota, 'total': len(getattr(servicos, nome).listar())}
            for titulo, rota, nome in ATALHOS
        ],
    }


class PaginaEntidade:
    def __init__(self, servico, campos_busca=('name',), padroes=None):
        self.servico = servico
        self.campos_busca = campos_busca
        self._padroes = padroes or {}

    def padroes(self):
        return dict(self._padroes)

    def novo_modal(self):
        return ModalFormulario(
            self.servico.formulario,
            self.servico.criar,
            self.servico.atualizar,
            self.servico.excluir,
        )

    def _modal(self, registros, abrir_id):
        modal = self.novo_modal()
        if abrir_id:
            documento = next((r for r in registros if r['id'] == abrir_id), None)
            if documento is not None:
                modal.abrir_edicao(documento)
        return modal

    def estado(self, busca=None, abrir_id=None):
        registros = self.servico.listar()
        return {
            'estado': 'ok',
            'registros': filtrar(registros, busca, self.campos_busca),
            'total': len(registros),
            'padroes': self.padroes(),
            'modal': self._modal(registros, abrir_id).to_dict(),
        }


class PaginaMaquinas(PaginaEntidade):
    def __init__(self, servico, servico_clientes):
        super().__init__(servico, campos_busca=('brand', 'fleet_number'))
        self.servico_clientes = servico_clientes

    def padroes(self):
        return {
            'brand': '',
            'equipment_type': TIPOS_MAQUINA[0],
            'operational_status': MAQUINA_STATUS_PADRAO,
            'manufacture_year': date.today().year,
            'customer_id': None,
            'owner_reference': None,
        }

    @staticmethod
    def _decorar(maquina, clientes):
        anexos = {}
        for tipo, campo in TIPOS_ANEXO.items():
            url = maquina.get(campo)
            anexos[tipo] = {'url': url, 'nome': nome_arquivo_de_url(url)} if url else None
        return {
            **maquina,
            'proprietario': rotulo_proprietario(
                maquina.get('owner_reference'), maquina.get('customer_id'), clientes
            ),
            'anexos': anexos,
            'avisos': avisos_propriedade(maquina),
        }

    def estado(self, busca=None, status=None, cliente=None, abrir_id=None):
        maquinas = self.servico.listar()
        clientes = self.servico_clientes.listar()
        filtradas = filtrar_maquinas(maquinas, busca, status, cliente)
        return {
            'estado': 'ok',
            'registros': [self._decorar(m, clientes) for m in filtradas],
            'total': len(maquinas),
            'filtros': {'busca': busca or '', 'status': status, 'cliente': cliente},
            'clientes': [{'id': c['id'], 'name': c['name']} for c in clientes],
            'opcoes': {
                'status': list(MAQUINA_STATUS_OPCOES),
                'tipos': list(TIPOS_MAQUINA),
                'marcas': list(MARCAS_MAQUINA),
                'proprietarios': [{'valor': OWNER_REF_CUSTOMER, 'rotulo': 'Cliente'}] + [
                    {'valor': valor, 'rotulo': rotulo} for valor, rotulo in EMPRESAS.items()
                ],
            },
            'padroes': self.padroes(),
            'modal': self._modal(maquinas, abrir_id).to_dict(),
        }

    def remover_anexo(self, id, tipo, **filtros):
        """
        Remove um anexo com a máquina aberta na edição. O modal continua aberto
        e o registro em edição perde a URL na hora.
        """
        modal = self._modal(self.servico.listar(), id)
        self.servico.remover_anexo(id, tipo)
        modal.limpar_campo(id, TIPOS_ANEXO[tipo])
        estado = self.estado(**filtros)
        estado['modal'] = modal.to_dict()
        return estado


class PaginaEmpresas(PaginaEntidade):
    """Só edição: sem criação nem exclusão."""

    def novo_modal(self):
        return ModalFormulario(EmpresaForm, None, self.servico.atualizar)
