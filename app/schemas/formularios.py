"""
Formulários de cada entidade.
"""
from datetime import date
from typing import Annotated, ClassVar, Literal, Optional

from pydantic import BeforeValidator, EmailStr, Field, field_validator

from app.models.opcoes import (
    MAQUINA_STATUS_OPCOES, MAQUINA_STATUS_PADRAO, MARCAS_MAQUINA, TIPOS_MAQUINA,
    AUXILIAR_STATUS_OPCOES, TIPOS_AUXILIAR, FASES_ORDEM, VEICULO_STATUS_OPCOES,
    OPCOES_PROPRIEDADE,
)
from app.schemas.base import (
    FormularioBase, Opcao, TextoOpcional, NumeroOpcional,
    obrigatorio, vazio_para_none, sentinela_para_none,
)

# Valores "nenhum" dos selects da tela
SEM_CLIENTE = '_NO_CUSTOMER_SELECTED_'
SEM_PROPRIETARIO = '_NOT_SPECIFIED_'
SEM_MAQUINA = '_NO_LINKED_EQUIPMENT_'
SEM_VEICULO = '_NO_VEHICLE_'


def _padrao_se_vazio(padrao):
    return BeforeValidator(lambda valor: padrao if vazio_para_none(valor) is None else valor)


# Número >= 0 que, vazio, vale zero
NumeroZero = Annotated[float, _padrao_se_vazio(0.0), Field(ge=0)]


class ClienteForm(FormularioBase):
    MENSAGENS: ClassVar[dict] = {
        'email': 'Endereço de email inválido.',
        'state': 'UF inválida.',
    }

    name: Annotated[str, obrigatorio('Nome é obrigatório.')] = None
    cnpj: Annotated[str, obrigatorio('CNPJ é obrigatório.')] = None
    email: Annotated[EmailStr, obrigatorio('Email é obrigatório.')] = None
    cep: TextoOpcional = None
    street: Annotated[str, obrigatorio('Rua é obrigatória.')] = None
    number: TextoOpcional = None
    complement: TextoOpcional = None
    neighborhood: TextoOpcional = None
    city: TextoOpcional = None
    state: TextoOpcional = None
    preferred_technician: TextoOpcional = None
    notes: TextoOpcional = None

    @field_validator('state')
    @classmethod
    def _uf(cls, valor):
        if valor is None:
            return valor
        if len(valor) != 2 or not valor.isalpha():
            raise ValueError('UF deve ter 2 letras.')
        return valor.upper()


class MaquinaForm(FormularioBase):
    OPCOES: ClassVar[dict] = {
        'brand': MARCAS_MAQUINA,
        'equipment_type': TIPOS_MAQUINA,
    }
    PADRAO_PERSONALIZADO: ClassVar[str] = 'Não especificado'
    MENSAGENS: ClassVar[dict] = {
        'brand': 'Marca é obrigatória.',
        'equipment_type': 'Tipo de equipamento é obrigatório.',
        'manufacture_year': 'Ano inválido.',
        'operational_status': 'Status operacional inválido.',
        'owner_reference': 'Proprietário inválido.',
    }

    brand: Opcao = None
    model: Annotated[str, obrigatorio('Modelo é obrigatório.')] = None
    chassis_number: Annotated[str, obrigatorio('Número do chassi é obrigatório.')] = None
    equipment_type: Opcao = None
    manufacture_year: Annotated[Optional[int], BeforeValidator(vazio_para_none)] = None
    operational_status: Annotated[
        Literal[MAQUINA_STATUS_OPCOES], _padrao_se_vazio(MAQUINA_STATUS_PADRAO)
    ] = MAQUINA_STATUS_PADRAO
    customer_id: Annotated[Optional[str], sentinela_para_none(SEM_CLIENTE)] = None
    owner_reference: Annotated[
        Optional[Literal[OPCOES_PROPRIEDADE]], sentinela_para_none(SEM_PROPRIETARIO)
    ] = None
    fleet_number: TextoOpcional = None

    tower_open_height_mm: NumeroOpcional = None
    tower_closed_height_mm: NumeroOpcional = None
    nominal_capacity_kg: NumeroOpcional = None
    battery_box_width_mm: NumeroOpcional = None
    battery_box_height_mm: NumeroOpcional = None
    battery_box_depth_mm: NumeroOpcional = None
    monthly_rental_value: NumeroOpcional = None
    hour_meter: NumeroOpcional = None
    notes: TextoOpcional = None

    @field_validator('manufacture_year')
    @classmethod
    def _ano(cls, valor):
        if valor is None:
            return valor
        if not 1900 <= valor <= date.today().year + 1:
            raise ValueError('Ano inválido.')
        return valor


class EquipamentoAuxiliarForm(FormularioBase):
    OPCOES: ClassVar[dict] = {'type': TIPOS_AUXILIAR}
    PADRAO_PERSONALIZADO: ClassVar[str] = 'Outro'
    MENSAGENS: ClassVar[dict] = {
        'type': 'Tipo é obrigatório.',
        'status': 'Status inválido.',
    }

    name: Annotated[str, obrigatorio('Nome é obrigatório.')] = None
    type: Opcao = None
    serial_number: TextoOpcional = None
    status: Annotated[
        Literal[AUXILIAR_STATUS_OPCOES], _padrao_se_vazio('Disponível')
    ] = 'Disponível'
    linked_equipment_id: Annotated[Optional[str], sentinela_para_none(SEM_MAQUINA)] = None
    notes: TextoOpcional = None


class OrdemServicoForm(FormularioBase):
    MENSAGENS: ClassVar[dict] = {
        'phase': 'Fase inválida.',
        'estimated_labor_cost': 'Custo estimado deve ser positivo.',
        'actual_labor_cost': 'Custo real deve ser positivo.',
    }

    order_number: Annotated[str, obrigatorio('Número da ordem é obrigatório.')] = None
    customer_id: Annotated[str, obrigatorio('Cliente é obrigatório.')] = None
    equipment_id: Annotated[str, obrigatorio('Equipamento é obrigatório.')] = None
    phase: Annotated[Literal[FASES_ORDEM], _padrao_se_vazio('Pendente')] = 'Pendente'
    technician_id: Annotated[str, obrigatorio('Técnico é obrigatório.')] = None
    nature_of_service: Annotated[str, obrigatorio('Natureza do serviço é obrigatória.')] = None
    vehicle_id: Annotated[Optional[str], sentinela_para_none(SEM_VEICULO)] = None
    estimated_labor_cost: NumeroZero = 0.0
    actual_labor_cost: NumeroOpcional = None
    start_date: Annotated[Optional[date], BeforeValidator(vazio_para_none)] = None
    end_date: Annotated[Optional[date], BeforeValidator(vazio_para_none)] = None
    description: Annotated[str, obrigatorio('Descrição é obrigatória.')] = None
    notes: TextoOpcional = None

    @field_validator('end_date')
    @classmethod
    def _termino_depois_do_inicio(cls, valor, info):
        inicio = info.data.get('start_date')
        if valor and inicio and valor < inicio:
            raise ValueError('Data de término anterior à data de início.')
        return valor


class TecnicoForm(FormularioBase):
    name: Annotated[str, obrigatorio('Nome é obrigatório.')] = None
    employee_id: Annotated[str, obrigatorio('Matrícula é obrigatória.')] = None
    specialization: TextoOpcional = None


class VeiculoForm(FormularioBase):
    MENSAGENS: ClassVar[dict] = {
        'current_mileage': 'Quilometragem deve ser positiva.',
        'fuel_consumption': 'Consumo de combustível deve ser positivo.',
        'cost_per_kilometer': 'Custo por quilômetro deve ser positivo.',
        'status': 'Status inválido.',
    }

    model: Annotated[str, obrigatorio('Modelo é obrigatório.')] = None
    license_plate: Annotated[str, obrigatorio('Placa é obrigatória.')] = None
    kind: Annotated[str, obrigatorio('Tipo de veículo é obrigatório.')] = None
    current_mileage: NumeroZero = 0.0
    fuel_consumption: NumeroZero = 0.0
    cost_per_kilometer: NumeroZero = 0.0
    registration_info: TextoOpcional = None
    status: Annotated[
        Literal[VEICULO_STATUS_OPCOES], _padrao_se_vazio('Disponível')
    ] = 'Disponível'


class EmpresaForm(FormularioBase):
    name: Annotated[str, obrigatorio('Nome da empresa é obrigatório.')] = None
    cnpj: Annotated[str, obrigatorio('CNPJ é obrigatório.')] = None
    cep: TextoOpcional = None
    street: Annotated[str, obrigatorio('Endereço é obrigatório.')] = None
    number: TextoOpcional = None
    complement: TextoOpcional = None
    neighborhood: TextoOpcional = None
    city: TextoOpcional = None
    state: TextoOpcional = None
    bank_name: TextoOpcional = None
    bank_agency: TextoOpcional = None
    bank_account: TextoOpcional = None
    bank_pix_key: TextoOpcional = None
