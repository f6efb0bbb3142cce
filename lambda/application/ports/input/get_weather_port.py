"""
Input Port: Interface para buscar o bundle de clima de uma localização
"""
from abc import ABC, abstractmethod

from domain.entities.weather_bundle import WeatherBundle


class IGetWeatherUseCase(ABC):
    """Interface para caso de uso de buscar clima por localização"""
    
    @abstractmethod
    async def execute(self, location: str, api_key: str) -> WeatherBundle:
        """
        Busca clima por texto livre ou "lat,lng"
        
        Raises:
            InvalidLocationException: Se location vazio
            MissingApiKeyException: Se api_key vazia
            WeatherProviderException: Se o provider falhar
        """
        pass
    
    @abstractmethod
    async def execute_by_coordinates(self, latitude: float, longitude: float, api_key: str) -> WeatherBundle:
        """Busca clima por coordenadas do dispositivo"""
        pass
