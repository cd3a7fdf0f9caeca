"""Utilidades do backend"""
from .error_utils import (
    APIError,
    ErroConexao,
    ErroValidacao,
    ErroMutacao,
    ErroReferencia,
    ErroDuplicado,
    ConfirmacaoNecessaria,
    DocumentoInvalido,
    error_response,
    success_response,
    handle_errors,
    falha_de_mutacao,
    log_request,
    log_operation
)
from .requisicao import ler_payload, exclusao_confirmada

__all__ = [
    'APIError',
    'ErroConexao',
    'ErroValidacao',
    'ErroMutacao',
    'ErroReferencia',
    'ErroDuplicado',
    'ConfirmacaoNecessaria',
    'DocumentoInvalido',
    'error_response',
    'success_response',
    'handle_errors',
    'falha_de_mutacao',
    'log_request',
    'log_operation',
    'ler_payload',
    'exclusao_confirmada'
]
