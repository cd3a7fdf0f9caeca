"""
Base dos formulários: validação com pydantic e mensagens em português.

Cada formulário recebe o dict vindo da tela (JSON ou multipart), aplica as
regras de obrigatoriedade / coerção e devolve o documento pronto para o banco
com `para_documento()`. Em caso de falha levanta ErroValidacao com
`{campo: [mensagens]}` e nada chega ao banco.
"""
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, model_validator
)

from app.utils.error_utils import ErroValidacao

# Valor enviado pelos selects quando o usuário escolhe "Outro (especificar)"
VALOR_PERSONALIZADO = '_CUSTOM_'

# Erros nativos do pydantic traduzidos
TRADUCOES = {
    'missing': 'Campo obrigatório.',
    'string_type': 'Deve ser um texto.',
    'float_parsing': 'Informe um número válido.',
    'float_type': 'Informe um número válido.',
    'int_parsing': 'Informe um número inteiro.',
    'int_type': 'Informe um número inteiro.',
    'int_from_float': 'Informe um número inteiro.',
    'finite_number': 'Informe um número válido.',
    'greater_than_equal': 'Deve ser maior ou igual a {ge}.',
    'less_than_equal': 'Deve ser menor ou igual a {le}.',
    'date_parsing': 'Data inválida (use AAAA-MM-DD).',
    'date_from_datetime_parsing': 'Data inválida (use AAAA-MM-DD).',
    'date_type': 'Data inválida (use AAAA-MM-DD).',
    'literal_error': 'Opção inválida.',
    'enum': 'Opção inválida.',
    'union_tag_invalid': 'Opção inválida.',
    'union_tag_not_found': 'Opção inválida.',
}


def _em_branco(valor):
    return valor is None or (isinstance(valor, str) and not valor.strip())


def obrigatorio(mensagem):
    """Validador para campo obrigatório; vazio ou só espaços também falham."""
    def validar(valor):
        if _em_branco(valor):
            raise ValueError(mensagem)
        return valor
    return BeforeValidator(validar)


def vazio_para_none(valor):
    return None if _em_branco(valor) else valor


def sentinela_para_none(*sentinelas):
    """Selects usam valores fixos ('_NO_CUSTOMER_SELECTED_'...) para "nenhum"."""
    def validar(valor):
        if _em_branco(valor) or valor in sentinelas:
            return None
        return valor
    return BeforeValidator(validar)


TextoOpcional = Annotated[Optional[str], BeforeValidator(vazio_para_none)]
# O limite fica no float interno: None não passa pela restrição ge
NumeroOpcional = Annotated[
    Optional[Annotated[float, Field(ge=0)]], BeforeValidator(vazio_para_none)
]


# --- Variante marcada para campos "lista de opções ou texto livre" ---

class Predefinido(BaseModel):
    tipo: Literal['predefinido'] = 'predefinido'
    valor: str


class Personalizado(BaseModel):
    tipo: Literal['personalizado'] = 'personalizado'
    texto: str = ''


Opcao = Annotated[Union[Predefinido, Personalizado], Field(discriminator='tipo')]


def para_variante(valor, opcoes, texto_personalizado=None):
    """
    Converte o que veio da tela numa variante.

    - dict com 'tipo' passa direto (cliente já mandou a variante);
    - VALOR_PERSONALIZADO usa o texto do campo custom_*;
    - vazio vira None (campo obrigatório reclama);
    - texto que está nas opções vira Predefinido, qualquer outro vira Personalizado.
    """
    if isinstance(valor, (Predefinido, Personalizado)):
        valor = valor.model_dump()
    if isinstance(valor, dict):
        # Predefinido fora da lista vale como texto livre
        if valor.get('tipo') == 'predefinido' and valor.get('valor') not in opcoes:
            return {'tipo': 'personalizado', 'texto': valor.get('valor') or ''}
        return valor
    if valor == VALOR_PERSONALIZADO:
        return {'tipo': 'personalizado', 'texto': texto_personalizado or ''}
    if _em_branco(valor):
        return None
    texto = str(valor).strip()
    if texto in opcoes:
        return {'tipo': 'predefinido', 'valor': texto}
    return {'tipo': 'personalizado', 'texto': texto}


def resolver_variante(opcao, padrao_vazio):
    """Variante -> texto gravado no banco."""
    if isinstance(opcao, Predefinido):
        return opcao.valor
    return opcao.texto.strip() or padrao_vazio


def _numero(valor):
    """Limites inteiros aparecem sem casa decimal nas mensagens (0.0 -> 0)."""
    if isinstance(valor, float) and valor.is_integer():
        return int(valor)
    return valor


def formatar_erros(erro, mensagens=None):
    """
    ValidationError -> {campo: [mensagens]}.

    Ordem: mensagem do próprio validador (ValueError), depois a mensagem
    fixa do formulário para o campo, depois a tradução do tipo de erro.
    """
    mensagens = mensagens or {}
    campos = {}
    for e in erro.errors():
        campo = str(e['loc'][0]) if e['loc'] else '__all__'
        ctx = e.get('ctx') or {}
        if e['type'] == 'value_error' and 'error' in ctx:
            texto = str(ctx['error'])
        elif campo in mensagens:
            texto = mensagens[campo]
        elif e['type'] in TRADUCOES:
            texto = TRADUCOES[e['type']].format(**{k: _numero(v) for k, v in ctx.items()})
        else:
            texto = e['msg']
        lista = campos.setdefault(campo, [])
        if texto not in lista:
            lista.append(texto)
    return campos


class FormularioBase(BaseModel):
    model_config = ConfigDict(validate_default=True, extra='ignore', str_strip_whitespace=True)

    # campo -> mensagem usada quando o pydantic rejeita o tipo (ex.: email)
    MENSAGENS: ClassVar[dict] = {}
    # campo -> opções predefinidas dos campos com variante
    OPCOES: ClassVar[dict] = {}
    # texto gravado quando a variante personalizada vem vazia
    PADRAO_PERSONALIZADO: ClassVar[str] = 'Não especificado'

    @model_validator(mode='before')
    @classmethod
    def _converter_variantes(cls, dados):
        if not isinstance(dados, dict) or not cls.OPCOES:
            return dados
        dados = dict(dados)
        for campo, opcoes in cls.OPCOES.items():
            if campo in dados:
                dados[campo] = para_variante(
                    dados[campo], opcoes, dados.get(f'custom_{campo}')
                )
        return dados

    @classmethod
    def validar(cls, dados):
        """
        Valida os dados do formulário.

        Raises:
            ErroValidacao: com os erros por campo
        """
        try:
            return cls.model_validate(dados or {})
        except ValidationError as e:
            raise ErroValidacao(formatar_erros(e, cls.MENSAGENS)) from e

    def para_documento(self):
        """Dict com os nomes das colunas e variantes já resolvidas para texto."""
        documento = self.model_dump(exclude=set(self.OPCOES))
        for campo in self.OPCOES:
            documento[campo] = resolver_variante(getattr(self, campo), self.PADRAO_PERSONALIZADO)
        return documento
