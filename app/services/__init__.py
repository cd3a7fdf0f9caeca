"""
Montagem dos serviços da aplicação.

Tudo é construído uma vez em create_app e guardado em app.extensions['goldmaq'];
as rotas pegam daí (nenhum cliente de banco/cache criado na importação).
"""
from flask import current_app

from app.models import (
    Cliente, Maquina, EquipamentoAuxiliar, OrdemServico, Tecnico, Veiculo, Empresa
)
from app.schemas.formularios import (
    ClienteForm, EquipamentoAuxiliarForm, OrdemServicoForm, TecnicoForm, VeiculoForm
)
from app.services.armazenamento import ArmazenamentoArquivos
from app.services.cache import CacheColecoes
from app.services.cep import ServicoCep
from app.services.empresas import ServicoEmpresas
from app.services.entidades import ServicoEntidade
from app.services.maquinas import ServicoMaquinas
from app.services.repositorio import RepositorioDocumentos


class Servicos:
    def __init__(self, cache, armazenamento, clientes, maquinas, auxiliares,
                 ordens, tecnicos, veiculos, empresas, cep):
        self.cache = cache
        self.armazenamento = armazenamento
        self.clientes = clientes
        self.maquinas = maquinas
        self.auxiliares = auxiliares
        self.ordens = ordens
        self.tecnicos = tecnicos
        self.veiculos = veiculos
        self.empresas = empresas
        self.cep = cep

    def entidades(self):
        """Slug da URL -> serviço do CRUD genérico."""
        return {
            'clientes': self.clientes,
            'tecnicos': self.tecnicos,
            'veiculos': self.veiculos,
            'ordens-servico': self.ordens,
            'equipamentos-auxiliares': self.auxiliares,
        }


def montar_servicos(config, db):
    cache = CacheColecoes(ttl=config['CACHE_TTL_SEGUNDOS'])
    armazenamento = ArmazenamentoArquivos(config['STORAGE_ROOT'], config['STORAGE_PUBLIC_URL'], db)

    def repo(modelo, *ordenacao):
        return RepositorioDocumentos(db, modelo, ordenacao)

    return Servicos(
        cache=cache,
        armazenamento=armazenamento,
        clientes=ServicoEntidade(repo(Cliente, Cliente.name), ClienteForm, cache, 'o cliente'),
        maquinas=ServicoMaquinas(repo(Maquina, Maquina.brand, Maquina.model), cache, armazenamento),
        auxiliares=ServicoEntidade(
            repo(EquipamentoAuxiliar, EquipamentoAuxiliar.name),
            EquipamentoAuxiliarForm, cache, 'o equipamento auxiliar'
        ),
        ordens=ServicoEntidade(
            repo(OrdemServico, OrdemServico.start_date.desc(), OrdemServico.order_number.desc()),
            OrdemServicoForm, cache, 'a ordem de serviço', campo_descricao='order_number'
        ),
        tecnicos=ServicoEntidade(repo(Tecnico, Tecnico.name), TecnicoForm, cache, 'o técnico'),
        veiculos=ServicoEntidade(
            repo(Veiculo, Veiculo.model), VeiculoForm, cache, 'o veículo',
            campo_descricao='license_plate'
        ),
        empresas=ServicoEmpresas(repo(Empresa), cache),
        cep=ServicoCep(config['VIACEP_URL'], timeout=config['VIACEP_TIMEOUT']),
    )


def servicos():
    """Serviços da aplicação atual (dentro de request/app context)."""
    return current_app.extensions['goldmaq']
