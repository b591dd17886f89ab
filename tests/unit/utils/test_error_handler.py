"""Tests unitarios para el traductor de errores."""

import asyncio
import json

import aiohttp
import pytest

from woocommerce_api.utils.error_handler import (
    AppException,
    ErrorCode,
    ErrorSeverity,
    WooCommerceAPIException,
    translate_decode_error,
    translate_http_error,
    translate_transport_error,
)


class TestTranslateHttpError:
    """Tests para rechazos del servidor."""

    def test_parses_woocommerce_error_body(self):
        """Debe extraer code y message del cuerpo estándar de WooCommerce."""
        body = json.dumps(
            {"code": "woocommerce_rest_cannot_create", "message": "Sorry, you cannot create.", "data": {"status": 401}}
        )

        error = translate_http_error(401, body, "POST", "coupons")

        assert error.error_code == ErrorCode.SERVER_REJECTION
        assert error.status_code == 401
        assert error.server_code == "woocommerce_rest_cannot_create"
        assert error.server_message == "Sorry, you cannot create."
        assert error.method == "POST"
        assert error.endpoint == "coupons"
        assert error.severity == ErrorSeverity.LOW

    def test_keeps_non_json_body_as_message(self):
        """Un cuerpo HTML se conserva truncado como mensaje."""
        error = translate_http_error(500, "<h1>Fatal error</h1>" + "x" * 1000, "GET", "orders")

        assert error.server_code is None
        assert error.server_message.startswith("<h1>Fatal error</h1>")
        assert len(error.server_message) == 500
        assert error.severity == ErrorSeverity.HIGH

    def test_empty_body(self):
        """Sin cuerpo el mensaje indica error desconocido."""
        error = translate_http_error(503, "", "GET", "orders")

        assert error.server_message is None
        assert "Unknown error" in error.message


class TestTranslateTransportError:
    """Tests para fallos de red."""

    def test_client_error(self):
        """Un aiohttp.ClientError se traduce sin status."""
        cause = aiohttp.ClientConnectionError("refused")

        error = translate_transport_error(cause, "GET", "products")

        assert error.is_transport_failure
        assert error.status_code is None
        assert error.cause is cause
        assert error.severity == ErrorSeverity.HIGH

    def test_timeout(self):
        """Un timeout tiene mensaje propio."""
        error = translate_transport_error(asyncio.TimeoutError(), "GET", "products")

        assert error.message == "Timeout calling GET products"


class TestTranslateDecodeError:
    """Tests para respuestas que no pueden decodificarse."""

    def test_decode_failure_keeps_status(self):
        """Debe conservar el status de la respuesta y la causa."""
        cause = ValueError("Expecting value")

        error = translate_decode_error(cause, 200, "GET", "taxes")

        assert error.is_decode_failure
        assert error.status_code == 200
        assert error.details["cause"] == "ValueError"


class TestAppException:
    """Tests para la excepción base."""

    def test_str_includes_code(self):
        """str() debe incluir el código de error."""
        error = AppException("boom", error_code=ErrorCode.CONFIGURATION_ERROR)

        assert str(error) == "CONFIGURATION_ERROR: boom"

    def test_to_dict(self):
        """to_dict debe exponer los campos estructurados."""
        error = WooCommerceAPIException("rejected", status_code=400, server_code="bad", endpoint="webhooks")

        data = error.to_dict()

        assert data["error_type"] == "WooCommerceAPIException"
        assert data["error_code"] == "SERVER_REJECTION"
        assert data["status_code"] == 400
        assert data["is_retryable"] is False
        assert data["details"]["server_code"] == "bad"

    def test_api_exception_is_app_exception(self):
        """WooCommerceAPIException debe poder capturarse como AppException."""
        with pytest.raises(AppException):
            raise WooCommerceAPIException("rejected")
