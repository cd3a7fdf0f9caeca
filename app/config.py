import os
from dotenv import load_dotenv

load_dotenv()

# Variável de ambiente -> chave de configuração do Flask.
# Sem qualquer uma delas não há como chegar ao banco nem ao storage.
CHAVES_OBRIGATORIAS = {
    'DATABASE_URL': 'SQLALCHEMY_DATABASE_URI',
    'STORAGE_ROOT': 'STORAGE_ROOT',
    'STORAGE_PUBLIC_URL': 'STORAGE_PUBLIC_URL',
}


class ConfiguracaoIncompleta(RuntimeError):
    """Falta alguma variável essencial para acessar o banco ou o storage."""

    def __init__(self, faltantes):
        self.faltantes = list(faltantes)
        super().__init__(
            "Configuração essencial ausente para as chaves: "
            f"{', '.join(self.faltantes)}. Verifique o arquivo .env ou as variáveis de ambiente."
        )


class Config:
    # A URL do Postgres deve começar com postgresql:// (não postgres://)
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    STORAGE_ROOT = os.getenv('STORAGE_ROOT')
    STORAGE_PUBLIC_URL = os.getenv('STORAGE_PUBLIC_URL')
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', 25 * 1024 * 1024))

    # Validade das listas em cache (5 minutos)
    CACHE_TTL_SEGUNDOS = int(os.getenv('CACHE_TTL_SEGUNDOS', 300))

    VIACEP_URL = os.getenv('VIACEP_URL', 'https://viacep.com.br/ws/{cep}/json/')
    VIACEP_TIMEOUT = float(os.getenv('VIACEP_TIMEOUT', 5))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    STORAGE_ROOT = None  # cada teste aponta para um tmp_path
    STORAGE_PUBLIC_URL = '/arquivos'


def validar_configuracao(config):
    """
    Verifica as chaves obrigatórias.

    Raises:
        ConfiguracaoIncompleta: com todas as variáveis ausentes de uma vez.
    """
    faltantes = [env for env, chave in CHAVES_OBRIGATORIAS.items() if not config.get(chave)]
    if faltantes:
        raise ConfiguracaoIncompleta(faltantes)
