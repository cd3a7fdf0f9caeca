"""
Helpers compartilhados pelos modelos-documento.
"""
import uuid
from numbers import Number


def gerar_id():
    return str(uuid.uuid4())


def verificar_documento(registro, opcoes=None, numericos=(), opcionais=()):
    """
    Confere um registro lido do banco contra o formato esperado.

    Args:
        registro: instância do modelo
        opcoes: dict campo -> tupla de valores aceitos
        numericos: campos que devem ser número ou None
        opcionais: campos de `opcoes` que aceitam None

    Returns:
        list[str]: problemas encontrados (vazia se o documento é válido)
    """
    problemas = []
    for campo, validos in (opcoes or {}).items():
        valor = getattr(registro, campo)
        if valor is None and campo in opcionais:
            continue
        if valor not in validos:
            problemas.append(f"{campo}={valor!r} fora das opções")
    for campo in numericos:
        valor = getattr(registro, campo)
        if valor is not None and (isinstance(valor, bool) or not isinstance(valor, Number)):
            problemas.append(f"{campo}={valor!r} não é numérico")
    return problemas


def formatar_endereco(street=None, number=None, complement=None, neighborhood=None,
                      city=None, state=None, cep=None, padrao='Endereço não fornecido'):
    """Monta o endereço de exibição: "Rua, 10 - Sala 2, Bairro, Cidade - UF"."""
    partes = []
    if street:
        linha = street
        if number:
            linha += f", {number}"
        if complement:
            linha += f" - {complement}"
        partes.append(linha)
    if neighborhood:
        partes.append(neighborhood)
    if city and state:
        partes.append(f"{city} - {state}")
    elif city or state:
        partes.append(city or state)

    endereco = ', '.join(partes).strip()
    if not endereco and cep:
        return cep
    return endereco or padrao
