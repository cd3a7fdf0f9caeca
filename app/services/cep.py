"""
Consulta de endereço por CEP (ViaCEP).
"""
import re

import requests

from app.utils.error_utils import ErroConexao, ErroReferencia, ErroValidacao


class ServicoCep:
    def __init__(self, url, timeout=5, sessao=None):
        self.url = url
        self.timeout = timeout
        self.sessao = sessao or requests.Session()

    @staticmethod
    def normalizar(cep):
        """Só dígitos; exige exatamente 8."""
        digitos = re.sub(r'\D', '', cep or '')
        if len(digitos) != 8:
            raise ErroValidacao({'cep': ['CEP deve conter 8 dígitos.']},
                                message='CEP deve conter 8 dígitos.')
        return digitos

    def consultar(self, cep):
        """
        Returns:
            dict: cep, street, neighborhood, city, state, complement

        Raises:
            ErroValidacao: formato inválido
            ErroReferencia: CEP não existe
            ErroConexao: ViaCEP fora do ar
        """
        digitos = self.normalizar(cep)
        try:
            resposta = self.sessao.get(self.url.format(cep=digitos), timeout=self.timeout)
            resposta.raise_for_status()
            dados = resposta.json()
        except requests.RequestException as e:
            raise ErroConexao(f"Não foi possível consultar o CEP. Detalhe: {e}") from e
        except ValueError as e:
            raise ErroConexao(f"Resposta inválida do serviço de CEP. Detalhe: {e}") from e

        if dados.get('erro'):
            raise ErroReferencia('CEP não encontrado.')

        return {
            'cep': f"{digitos[:5]}-{digitos[5:]}",
            'street': dados.get('logradouro') or '',
            'neighborhood': dados.get('bairro') or '',
            'city': dados.get('localidade') or '',
            'state': dados.get('uf') or '',
            'complement': dados.get('complemento') or '',
        }
