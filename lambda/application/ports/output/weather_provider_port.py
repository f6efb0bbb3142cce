"""Weather Provider Port - Interface do provedor climático"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from domain.entities.weather_bundle import WeatherBundle
from domain.value_objects.time_window import TimeWindow


class IWeatherProvider(ABC):
    """
    Interface do provedor de dados meteorológicos.
    Stateless: monta a consulta, faz o request e normaliza o retorno.
    """

    @abstractmethod
    def build_window(self, now: Optional[datetime] = None) -> TimeWindow:
        """Janela [now - 24h, now + 24h] para a consulta"""
        pass

    @abstractmethod
    async def fetch_by_query(self, location: str, api_key: str) -> Dict[str, Any]:
        """
        Busca dados brutos por texto livre (cidade, endereço)
        
        Raises:
            InvalidLocationException: Se location vazio
            MissingApiKeyException: Se api_key vazia
            QuotaExceededException: Se o provider responder 429
            WeatherProviderException: Qualquer outra falha
        """
        pass

    @abstractmethod
    async def fetch_by_coordinates(self, latitude: float, longitude: float, api_key: str) -> Dict[str, Any]:
        """
        Busca dados brutos por coordenadas (sem validação de faixa)
        
        Raises:
            MissingApiKeyException: Se api_key vazia
            QuotaExceededException: Se o provider responder 429
            WeatherProviderException: Qualquer outra falha
        """
        pass

    @abstractmethod
    def normalize(self, raw: Dict[str, Any], now: Optional[datetime] = None) -> WeatherBundle:
        """Transformação pura resposta bruta -> WeatherBundle"""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'VisualCrossing')"""
        pass
