"""
Input Adapter: Lambda Handler HTTP
Presentation Layer: gerencia requisições HTTP e delega para o use case
"""
import asyncio
from datetime import datetime, timezone

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.use_cases.get_weather_use_case import GetWeatherUseCase

# Domain Layer - Exceptions
from domain.exceptions import (
    InvalidLocationException,
    MissingApiKeyException,
    QuotaExceededException,
    WeatherProviderException
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.visualcrossing import get_visualcrossing_provider

# Shared Layer - Utilities
from shared.config import settings
from shared.utils.validators import GenericValidator
from shared.config.logger_config import get_logger

logger = get_logger()

API_KEY_HEADER = "x-weather-api-key"

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=settings.CORS_ORIGIN))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(MissingApiKeyException)(exception_service.handle_missing_api_key)
app.exception_handler(InvalidLocationException)(exception_service.handle_invalid_location)
app.exception_handler(QuotaExceededException)(exception_service.handle_quota_exceeded)
app.exception_handler(WeatherProviderException)(exception_service.handle_provider_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def _resolve_api_key() -> str:
    """API key do header X-Weather-Api-Key, senão WEATHER_API_KEY do ambiente"""
    headers = app.current_event.headers or {}
    for name, value in headers.items():
        if name.lower() == API_KEY_HEADER and value:
            return value
    return settings.WEATHER_API_KEY


# =============================
# Routes
# =============================

@app.get("/api/weather")
def get_weather_route():
    """
    GET /api/weather?location=Medellín
    
    Returns current conditions + 24h before/after for a free-text location
    """
    location = app.current_event.get_query_string_value(name="location", default_value=None)
    api_key = _resolve_api_key()
    
    use_case = GetWeatherUseCase(get_visualcrossing_provider())
    bundle = run_async(use_case.execute(location, api_key))
    
    return bundle.to_api_response()


@app.get("/api/weather/coordinates")
def get_weather_by_coordinates_route():
    """
    GET /api/weather/coordinates?lat=6.2442&lng=-75.5812
    
    Returns current conditions + 24h before/after for a device position
    """
    latitude = GenericValidator.validate_float(
        app.current_event.get_query_string_value(name="lat", default_value=None),
        "lat"
    )
    longitude = GenericValidator.validate_float(
        app.current_event.get_query_string_value(name="lng", default_value=None),
        "lng"
    )
    api_key = _resolve_api_key()
    
    use_case = GetWeatherUseCase(get_visualcrossing_provider())
    bundle = run_async(use_case.execute_by_coordinates(latitude, longitude, api_key))
    
    return bundle.to_api_response()


@app.get("/health")
def health_route():
    return {
        'status': 'healthy',
        'service': 'weather-current',
        'timestamp': datetime.now(tz=timezone.utc).isoformat()
    }


# =============================
# Lambda Handler
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function
    
    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging
    
    Available routes:
    - GET /api/weather?location=<text>
    - GET /api/weather/coordinates?lat=<lat>&lng=<lng>
    - GET /health
    
    API key: header X-Weather-Api-Key (fallback: WEATHER_API_KEY)
    """
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}
    
    logger.info(
        "Requisição Lambda recebida",
        path=event.get('path'),
        method=event.get('httpMethod'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A')
    )
    
    response = app.resolve(event, context)
    
    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )
    
    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente
    
    Reutiliza o loop entre invocações Lambda (warm starts) para que a
    sessão aiohttp continue válida.
    """
    global _global_event_loop
    
    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop
    
    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)
    
    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
