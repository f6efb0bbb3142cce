"""
Testes para ExceptionHandlerService
Garante o mapeamento exceção → resposta HTTP
"""
import json

from domain.constants import Messages
from domain.exceptions import (
    InvalidLocationException,
    MissingApiKeyException,
    QuotaExceededException,
    WeatherProviderException
)
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService


class TestExceptionHandlerService:
    """Testes para o serviço de tratamento de exceções"""

    def test_handle_missing_api_key(self):
        """REGRA: MissingApiKeyException deve retornar 401"""
        response = ExceptionHandlerService.handle_missing_api_key(MissingApiKeyException("API key is required"))

        assert response.status_code == 401
        assert response.content_type == "application/json"
        body = json.loads(response.body)
        assert body["type"] == "MissingApiKeyException"
        assert body["message"] == Messages.NO_API_KEY

    def test_handle_invalid_location(self):
        """REGRA: InvalidLocationException deve retornar 400 com detalhes"""
        ex = InvalidLocationException("Location must not be empty", details={"location": "   "})

        response = ExceptionHandlerService.handle_invalid_location(ex)

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["message"] == "Location must not be empty"
        assert body["details"] == {"location": "   "}

    def test_handle_quota_exceeded_ignores_provider_body(self):
        """REGRA: 429 sempre com a mensagem fixa de cota"""
        ex = QuotaExceededException("You have exceeded the maximum number of daily result records")

        response = ExceptionHandlerService.handle_quota_exceeded(ex)

        assert response.status_code == 429
        assert json.loads(response.body)["message"] == Messages.QUOTA_EXCEEDED

    def test_handle_provider_error(self):
        """REGRA: falha do provider retorna 502 com a mensagem e o status originais"""
        ex = WeatherProviderException("Bad API Request:Invalid location parameter value.", status_code=400)

        response = ExceptionHandlerService.handle_provider_error(ex)

        assert response.status_code == 502
        body = json.loads(response.body)
        assert body["message"] == "Bad API Request:Invalid location parameter value."
        assert body["providerStatus"] == 400

    def test_handle_provider_error_without_message(self):
        """REGRA: mensagem vazia cai para a genérica"""
        response = ExceptionHandlerService.handle_provider_error(WeatherProviderException(""))

        body = json.loads(response.body)
        assert body["message"] == Messages.GENERIC
        assert body["providerStatus"] is None

    def test_handle_value_error(self):
        """REGRA: ValueError deve retornar 400"""
        response = ExceptionHandlerService.handle_value_error(ValueError("Invalid lat format: north"))

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["type"] == "ValidationError"
        assert "north" in body["message"]

    def test_handle_unexpected_error(self):
        """REGRA: erros inesperados retornam 500 sem vazar detalhes"""
        response = ExceptionHandlerService.handle_unexpected_error(RuntimeError("secret stack info"))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error"] == "Internal server error"
        assert "secret" not in response.body

    def test_unicode_is_not_escaped(self):
        """REGRA: corpo JSON preserva acentos"""
        ex = InvalidLocationException("Localização inválida")

        response = ExceptionHandlerService.handle_invalid_location(ex)

        assert "Localização" in response.body
