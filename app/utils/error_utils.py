"""
Utilidades centralizadas para tratamento de erros e respostas padronizadas.
Fornece exceções da API, helpers de resposta e logging estruturado.
"""
from contextlib import contextmanager
from datetime import datetime, timezone
from functools import wraps
import logging
import traceback

from flask import jsonify, current_app
from sqlalchemy.exc import OperationalError, SQLAlchemyError

# Configurar logger
logger = logging.getLogger('goldmaq')


class APIError(Exception):
    """
    Exceção base para erros da API.
    Permite especificar código HTTP, código interno e dados extras.
    """
    status_code = 400
    code = None

    def __init__(self, message, status_code=None, payload=None, code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['error'] = self.message
        rv['status'] = self.status_code
        if self.code:
            rv['code'] = self.code
        rv['timestamp'] = datetime.now(timezone.utc).isoformat()
        return rv


class ErroConexao(APIError):
    """Banco ou storage inacessível. A tela vira um estado de erro de página inteira."""
    status_code = 503
    code = 'CONNECTION_UNAVAILABLE'


class ErroValidacao(APIError):
    """Formulário rejeitado pelo esquema; nada foi enviado ao banco."""
    status_code = 422
    code = 'VALIDATION_ERROR'

    def __init__(self, campos, message='Dados do formulário inválidos.'):
        super().__init__(message, payload={'campos': campos})
        self.campos = campos


class ErroMutacao(APIError):
    """Escrita, exclusão ou upload rejeitado pelo banco/storage."""
    status_code = 500
    code = 'MUTATION_FAILED'


class ErroReferencia(APIError):
    """Registro alvo inexistente ou sem identificador."""
    status_code = 404
    code = 'NOT_FOUND'


class ErroDuplicado(APIError):
    status_code = 409
    code = 'DUPLICATE'


class ConfirmacaoNecessaria(APIError):
    """Exclusão pedida sem a confirmação explícita do usuário."""
    status_code = 409
    code = 'CONFIRMATION_REQUIRED'


class DocumentoInvalido(APIError):
    """Documento armazenado que não respeita o formato esperado."""
    status_code = 500
    code = 'MALFORMED_DOCUMENT'


def error_response(message, status_code=400, code=None, details=None):
    """
    Gera uma resposta de erro padronizada.

    Args:
        message: Mensagem de erro para o usuário
        status_code: Código HTTP (default 400)
        code: Código de erro interno (opcional)
        details: Detalhes adicionais (opcional, só em modo debug)

    Returns:
        tuple: (response, status_code)
    """
    response = {
        'error': message,
        'status': status_code,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }

    if code:
        response['code'] = code

    # Detalhes técnicos só em desenvolvimento
    if details and current_app.debug:
        response['details'] = details

    return jsonify(response), status_code


def success_response(data=None, message=None, status_code=200):
    """
    Gera uma resposta de sucesso padronizada.

    Returns:
        tuple: (response, status_code)
    """
    response = {'success': True}

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    return jsonify(response), status_code


def handle_errors(f):
    """
    Decorator para tratar erros nas rotas Flask.
    Captura exceções e as converte em respostas JSON padronizadas;
    nenhuma falha remota chega ao usuário como erro não tratado.

    Uso:
        @bp.route('/api/exemplo')
        @handle_errors
        def exemplo():
            ...
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except APIError as e:
            logger.warning(f"{type(e).__name__} in {f.__name__}: {e.message}")
            return jsonify(e.to_dict()), e.status_code
        except OperationalError as e:
            logger.error(f"Store unavailable in {f.__name__}: {e}")
            erro = ErroConexao('Não foi possível conectar ao banco de dados.')
            return jsonify(erro.to_dict()), erro.status_code
        except ValueError as e:
            logger.warning(f"ValueError in {f.__name__}: {str(e)}")
            return error_response(str(e), 400, 'VALIDATION_ERROR')
        except KeyError as e:
            logger.warning(f"KeyError in {f.__name__}: Missing key {e}")
            return error_response(f"Campo obrigatório ausente: {e}", 400, 'MISSING_FIELD')
        except Exception as e:
            # Log completo para depuração
            logger.error(f"Unhandled error in {f.__name__}: {str(e)}")
            logger.error(traceback.format_exc())

            # Resposta genérica ao usuário
            return error_response(
                "Erro interno do servidor. Por favor, tente novamente mais tarde.",
                500,
                'SERVER_ERROR',
                details=str(e) if current_app.debug else None
            )
    return decorated_function


@contextmanager
def falha_de_mutacao(descricao):
    """
    Converte falhas de banco/storage de uma mutação em ErroMutacao
    com a mensagem "Não foi possível <descricao>. Detalhe: ...".
    Erros já classificados (APIError) passam intactos.
    """
    try:
        yield
    except APIError:
        raise
    except OperationalError as e:
        raise ErroConexao(f"Não foi possível {descricao}. Detalhe: {e}") from e
    except (SQLAlchemyError, OSError) as e:
        log_operation(descricao, status='error', detalhe=str(e))
        raise ErroMutacao(f"Não foi possível {descricao}. Detalhe: {e}") from e


def log_request(route_name, **context):
    """
    Registra uma requisição com contexto.

    Args:
        route_name: Nome da rota/operação
        **context: Dados adicionais (maquina_id, colecao, etc.)
    """
    log_data = {
        'route': route_name,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        **context
    }
    logger.info(f"REQUEST: {log_data}")


def log_operation(operation, status='success', **context):
    """
    Registra o resultado de uma operação.

    Args:
        operation: Nome da operação (criar_maquina, remover_anexo, etc.)
        status: 'success', 'warning', 'error'
        **context: Dados adicionais
    """
    log_data = {
        'operation': operation,
        'status': status,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        **context
    }

    if status == 'error':
        logger.error(f"OPERATION: {log_data}")
    elif status == 'warning':
        logger.warning(f"OPERATION: {log_data}")
    else:
        logger.info(f"OPERATION: {log_data}")

