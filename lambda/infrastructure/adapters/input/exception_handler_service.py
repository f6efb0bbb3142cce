"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from aws_lambda_powertools.event_handler import Response

from domain.constants import Messages
from domain.exceptions import (
    InvalidLocationException,
    MissingApiKeyException,
    QuotaExceededException,
    WeatherProviderException,
)
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def _json_response(status_code: int, body: dict) -> Response:
        return Response(
            status_code=status_code,
            content_type="application/json",
            body=json.dumps(body, ensure_ascii=False)
        )

    @staticmethod
    def handle_missing_api_key(ex: MissingApiKeyException) -> Response:
        """Handle 401 - API key ausente"""
        ExceptionHandlerService.logger.warning("Missing API key", error=str(ex))
        return ExceptionHandlerService._json_response(401, {
            "type": "MissingApiKeyException",
            "error": "Missing API key",
            "message": Messages.NO_API_KEY
        })

    @staticmethod
    def handle_invalid_location(ex: InvalidLocationException) -> Response:
        """Handle 400 - Localização vazia"""
        ExceptionHandlerService.logger.warning("Invalid location", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(400, {
            "type": "InvalidLocationException",
            "error": "Invalid location",
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_quota_exceeded(ex: QuotaExceededException) -> Response:
        """Handle 429 - Cota diária do provider excedida (mensagem fixa)"""
        ExceptionHandlerService.logger.warning("Provider quota exceeded")
        return ExceptionHandlerService._json_response(429, {
            "type": "QuotaExceededException",
            "error": "Quota exceeded",
            "message": Messages.QUOTA_EXCEEDED
        })

    @staticmethod
    def handle_provider_error(ex: WeatherProviderException) -> Response:
        """Handle 502 - Falha no provider (mensagem do provider repassada)"""
        ExceptionHandlerService.logger.error(
            "Weather provider error",
            error=str(ex),
            status=ex.status_code,
            details=ex.details
        )
        return ExceptionHandlerService._json_response(502, {
            "type": "WeatherProviderException",
            "error": "Weather provider error",
            "message": ex.message or Messages.GENERIC,
            "providerStatus": ex.status_code
        })

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return ExceptionHandlerService._json_response(400, {
            "type": "ValidationError",
            "error": "Validation error",
            "message": str(ex)
        })

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return ExceptionHandlerService._json_response(500, {
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        })
