"""
Async Use Case: Get Weather
Busca a timeline no provider e normaliza para WeatherBundle
"""
from ddtrace import tracer

from application.ports.input.get_weather_port import IGetWeatherUseCase
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.weather_bundle import WeatherBundle
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetWeatherUseCase(IGetWeatherUseCase):
    """Async use case: clima atual + 24h antes/depois de uma localização"""
    
    def __init__(self, weather_provider: IWeatherProvider):
        self.weather_provider = weather_provider
    
    @tracer.wrap(resource="use_case.get_weather")
    async def execute(self, location: str, api_key: str) -> WeatherBundle:
        raw = await self.weather_provider.fetch_by_query(location, api_key)
        bundle = self.weather_provider.normalize(raw)
        
        logger.info(
            "Weather bundle ready",
            location=location,
            resolved_address=bundle.resolved_address,
            hours_prev=len(bundle.hours_prev_24),
            hours_next=len(bundle.hours_next_24)
        )
        return bundle
    
    @tracer.wrap(resource="use_case.get_weather_by_coordinates")
    async def execute_by_coordinates(self, latitude: float, longitude: float, api_key: str) -> WeatherBundle:
        raw = await self.weather_provider.fetch_by_coordinates(latitude, longitude, api_key)
        bundle = self.weather_provider.normalize(raw)
        
        logger.info(
            "Weather bundle ready",
            latitude=latitude,
            longitude=longitude,
            resolved_address=bundle.resolved_address,
            hours_prev=len(bundle.hours_prev_24),
            hours_next=len(bundle.hours_next_24)
        )
        return bundle
