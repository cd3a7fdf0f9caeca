# Importar todos os modelos para facilitar o acesso
from app.models.cliente import Cliente
from app.models.maquina import Maquina
from app.models.equipamento_auxiliar import EquipamentoAuxiliar
from app.models.ordem_servico import OrdemServico
from app.models.tecnico import Tecnico
from app.models.veiculo import Veiculo
from app.models.empresa import Empresa
from app.models.objeto_armazenado import ObjetoArmazenado
