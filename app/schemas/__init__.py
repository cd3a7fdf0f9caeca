from app.schemas.base import (
    FormularioBase, Predefinido, Personalizado, VALOR_PERSONALIZADO,
    para_variante, resolver_variante, formatar_erros,
)
from app.schemas.formularios import (
    ClienteForm, MaquinaForm, EquipamentoAuxiliarForm, OrdemServicoForm,
    TecnicoForm, VeiculoForm, EmpresaForm,
)
