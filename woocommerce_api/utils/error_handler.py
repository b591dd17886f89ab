"""
Sistema de manejo de errores personalizado.

Este módulo define las excepciones del cliente y las funciones que
normalizan fallos de transporte, rechazos HTTP y respuestas malformadas
en una única excepción de dominio.

No existe lógica de reintentos en esta capa: la política de reintentos,
si se necesita, pertenece al llamador.
"""

import asyncio
import json
import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandarizados del cliente.
    """

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Taxonomía de fallos de la API
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    SERVER_REJECTION = "SERVER_REJECTION"
    DECODE_FAILURE = "DECODE_FAILURE"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones del cliente.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandarizado
            details: Información adicional del error
            status_code: Código HTTP asociado (si existe)
            severity: Severidad del error
            is_retryable: Si la operación puede reintentarse
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.severity = severity
        self.is_retryable = is_retryable
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "status_code": self.status_code,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class WooCommerceAPIException(AppException):
    """
    Excepción única para fallos de la API REST de WooCommerce.

    Cubre fallos de red (sin respuesta), rechazos del servidor (status no 2xx)
    y respuestas que no pueden decodificarse.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.SERVER_REJECTION,
        status_code: Optional[int] = None,
        server_code: Optional[str] = None,
        server_message: Optional[str] = None,
        method: Optional[str] = None,
        endpoint: Optional[str] = None,
        cause: Optional[BaseException] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de la API.

        Args:
            message: Mensaje de error
            error_code: TRANSPORT_FAILURE, SERVER_REJECTION o DECODE_FAILURE
            status_code: Código HTTP de la respuesta (None si no hubo respuesta)
            server_code: Código de error devuelto por WooCommerce
            server_message: Mensaje devuelto por WooCommerce
            method: Método HTTP de la llamada
            endpoint: Ruta llamada
            cause: Excepción original
            **kwargs: Argumentos adicionales para AppException
        """
        severity = ErrorSeverity.MEDIUM
        if error_code == ErrorCode.TRANSPORT_FAILURE or (status_code and status_code >= 500):
            severity = ErrorSeverity.HIGH
        elif status_code and 400 <= status_code < 500:
            severity = ErrorSeverity.LOW

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status_code,
            severity=severity,
            is_retryable=False,
            **kwargs,
        )

        self.server_code = server_code
        self.server_message = server_message
        self.method = method
        self.endpoint = endpoint
        self.cause = cause

        self.details.update(
            {
                "server_code": server_code,
                "server_message": server_message,
                "method": method,
                "endpoint": endpoint,
                "cause": type(cause).__name__ if cause is not None else None,
            }
        )

    @property
    def is_transport_failure(self) -> bool:
        return self.error_code == ErrorCode.TRANSPORT_FAILURE

    @property
    def is_server_rejection(self) -> bool:
        return self.error_code == ErrorCode.SERVER_REJECTION

    @property
    def is_decode_failure(self) -> bool:
        return self.error_code == ErrorCode.DECODE_FAILURE


# === FUNCIONES DE TRADUCCIÓN ===


def translate_transport_error(
    exception: BaseException, method: Optional[str] = None, endpoint: Optional[str] = None
) -> WooCommerceAPIException:
    """
    Convierte un fallo de red o timeout en WooCommerceAPIException.

    Args:
        exception: Excepción original del transporte
        method: Método HTTP
        endpoint: Ruta llamada

    Returns:
        WooCommerceAPIException: Excepción traducida (sin status)
    """
    if isinstance(exception, asyncio.TimeoutError):
        message = f"Timeout calling {method} {endpoint}"
    else:
        message = f"Network error calling {method} {endpoint}: {exception}"

    app_exception = WooCommerceAPIException(
        message=message,
        error_code=ErrorCode.TRANSPORT_FAILURE,
        method=method,
        endpoint=endpoint,
        cause=exception,
    )
    log_error(app_exception)
    return app_exception


def translate_http_error(
    status_code: int,
    body: str,
    method: Optional[str] = None,
    endpoint: Optional[str] = None,
) -> WooCommerceAPIException:
    """
    Convierte una respuesta no 2xx en WooCommerceAPIException.

    WooCommerce responde errores con la forma
    ``{"code": "...", "message": "...", "data": {"status": 400}}``.
    Si el cuerpo no es JSON se conserva como mensaje.

    Args:
        status_code: Código HTTP recibido
        body: Cuerpo de la respuesta como texto
        method: Método HTTP
        endpoint: Ruta llamada

    Returns:
        WooCommerceAPIException: Excepción traducida
    """
    server_code = None
    server_message = None
    try:
        payload = json.loads(body) if body else None
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        server_code = payload.get("code")
        server_message = payload.get("message")
    elif body:
        server_message = body.strip()[:500]

    app_exception = WooCommerceAPIException(
        message=f"HTTP {status_code} on {method} {endpoint}: {server_message or 'Unknown error'}",
        error_code=ErrorCode.SERVER_REJECTION,
        status_code=status_code,
        server_code=server_code,
        server_message=server_message,
        method=method,
        endpoint=endpoint,
    )
    log_error(app_exception)
    return app_exception


def translate_decode_error(
    exception: BaseException,
    status_code: Optional[int] = None,
    method: Optional[str] = None,
    endpoint: Optional[str] = None,
) -> WooCommerceAPIException:
    """
    Convierte un fallo al decodificar la respuesta en WooCommerceAPIException.

    Args:
        exception: Excepción original (JSON inválido o forma inesperada)
        status_code: Código HTTP de la respuesta
        method: Método HTTP
        endpoint: Ruta llamada

    Returns:
        WooCommerceAPIException: Excepción traducida
    """
    app_exception = WooCommerceAPIException(
        message=f"Could not decode response of {method} {endpoint}: {exception}",
        error_code=ErrorCode.DECODE_FAILURE,
        status_code=status_code,
        method=method,
        endpoint=endpoint,
        cause=exception,
    )
    log_error(app_exception)
    return app_exception


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Loggea un error de manera consistente.

    Args:
        exception: Excepción a loggear
        context: Contexto adicional
        level: Nivel de logging
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
                "is_retryable": exception.is_retryable,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"
        log_data["traceback"] = traceback.format_exc()

    logger.log(level, message, extra=log_data)
