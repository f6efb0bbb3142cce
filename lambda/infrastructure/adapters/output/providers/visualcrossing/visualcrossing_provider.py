"""Visual Crossing Provider - Implementação do provider para a Timeline API"""

import asyncio
import json
from datetime import datetime
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, Messages
from domain.entities.weather_bundle import WeatherBundle
from domain.exceptions import QuotaExceededException, WeatherProviderException
from domain.value_objects.location_query import LocationQuery
from domain.value_objects.time_window import TimeWindow
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from infrastructure.adapters.output.providers.visualcrossing.mappers import VisualCrossingDataMapper
from shared.config.logger_config import get_logger
from shared.utils.validators import ApiKeyValidator, LocationValidator

logger = get_logger(child=True)


class VisualCrossingProvider(IWeatherProvider):
    """
    Provider para Visual Crossing Timeline API
    
    Características:
    - Uma requisição GET por chamada, sem retry nem backoff
    - Janela de 48h centrada em agora (24h antes / 24h depois)
    - unitGroup=metric, lang=es, contentType=json
    - Stateless: nada é guardado entre chamadas
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        """
        Args:
            base_url: URL base da Timeline API (padrão: API.VISUALCROSSING_BASE_URL)
            session_manager: Gerenciador de sessão HTTP (usa singleton se None)
        """
        self.base_url = (base_url or API.VISUALCROSSING_BASE_URL).rstrip('/')
        self.session_manager = session_manager or get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST
        )
    
    @property
    def provider_name(self) -> str:
        return "VisualCrossing"
    
    def build_window(self, now: Optional[datetime] = None) -> TimeWindow:
        return TimeWindow.around(now)
    
    def build_url(self, location: LocationQuery, api_key: str, window: TimeWindow) -> str:
        """
        Monta a URL da consulta
        
        Formato:
            <base>/<location>/<start>/<end>?unitGroup=metric&lang=es&key=<key>&contentType=json
        """
        query = urlencode({
            'unitGroup': API.UNIT_GROUP,
            'lang': API.LANG,
            'key': api_key,
            'contentType': API.CONTENT_TYPE
        })
        return f"{self.base_url}/{location.to_path_segment()}/{window.start}/{window.end}?{query}"
    
    @tracer.wrap(resource="visualcrossing.fetch_by_query")
    async def fetch_by_query(self, location: str, api_key: str) -> Dict[str, Any]:
        location = LocationValidator.validate(location)
        api_key = ApiKeyValidator.validate(api_key)
        
        return await self._fetch(LocationQuery(location), api_key)
    
    @tracer.wrap(resource="visualcrossing.fetch_by_coordinates")
    async def fetch_by_coordinates(self, latitude: float, longitude: float, api_key: str) -> Dict[str, Any]:
        api_key = ApiKeyValidator.validate(api_key)
        
        return await self._fetch(LocationQuery.from_coordinates(latitude, longitude), api_key)
    
    def normalize(self, raw: Dict[str, Any], now: Optional[datetime] = None) -> WeatherBundle:
        return VisualCrossingDataMapper.map_response_to_bundle(raw, now=now)
    
    async def _fetch(self, location: LocationQuery, api_key: str) -> Dict[str, Any]:
        """
        Executa o GET e converte falhas em exceções de domínio
        
        Flow:
        1. Calcula janela nova (nunca reaproveitada)
        2. GET na Timeline API
        3. 429 → QuotaExceededException, outros >= 400 → WeatherProviderException
        4. Retorna JSON bruto
        """
        window = self.build_window()
        url = self.build_url(location, api_key, window)
        
        logger.info(
            "Fetching Visual Crossing timeline",
            location=location.text,
            window_start=window.start,
            window_end=window.end
        )
        
        session = await self.session_manager.get_session()
        
        try:
            async with session.get(url) as response:
                if response.status == API.STATUS_QUOTA_EXCEEDED:
                    body = await self._read_text(response)
                    logger.warning("Visual Crossing quota exceeded", location=location.text)
                    raise QuotaExceededException(
                        Messages.QUOTA_EXCEEDED,
                        details={"status": response.status, "body": body}
                    )
                
                if response.status >= 400:
                    body = (await self._read_text(response)).strip()
                    message = body or response.reason or f"HTTP {response.status}"
                    logger.warning(
                        "Visual Crossing request failed",
                        status=response.status,
                        error=message,
                        location=location.text
                    )
                    raise WeatherProviderException(
                        message,
                        status_code=response.status,
                        details={"location": location.text}
                    )
                
                return await response.json(content_type=None)
        
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Visual Crossing transport error", error=str(e), location=location.text)
            raise WeatherProviderException(
                str(e) or Messages.GENERIC,
                details={"location": location.text, "type": type(e).__name__}
            ) from e
        
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Invalid JSON from Visual Crossing", error=str(e), location=location.text)
            raise WeatherProviderException(
                f"Invalid JSON response: {e}",
                details={"location": location.text, "type": type(e).__name__}
            ) from e

    @staticmethod
    async def _read_text(response: aiohttp.ClientResponse) -> str:
        """Corpo de erro como texto (bytes inválidos viram U+FFFD)"""
        raw = await response.read()
        return raw.decode('utf-8', errors='replace')


# Factory singleton
_provider_instance: Optional[VisualCrossingProvider] = None


def get_visualcrossing_provider() -> VisualCrossingProvider:
    """
    Factory para obter singleton do provider
    Reutiliza entre invocações Lambda (warm starts)
    """
    global _provider_instance
    
    if _provider_instance is None:
        _provider_instance = VisualCrossingProvider()
    
    return _provider_instance
