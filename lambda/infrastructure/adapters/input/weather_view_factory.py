"""
Weather View Factory - monta a WeatherView com os adapters padrão
"""
from typing import Optional

from application.ports.output.geolocation_port import IGeolocationProvider
from application.ports.output.key_value_store_port import IKeyValueStore
from application.services.weather_view import WeatherView
from application.use_cases.get_weather_use_case import GetWeatherUseCase
from infrastructure.adapters.output.geolocation.configured_geolocation_provider import ConfiguredGeolocationProvider
from infrastructure.adapters.output.providers.visualcrossing import get_visualcrossing_provider
from infrastructure.adapters.output.storage.json_file_store import JsonFileKeyValueStore


def create_weather_view(
    store: Optional[IKeyValueStore] = None,
    geolocation: Optional[IGeolocationProvider] = None,
    **kwargs
) -> WeatherView:
    """
    Cria WeatherView com Visual Crossing, store em arquivo JSON e
    geolocalização configurada (cada um substituível)
    """
    return WeatherView(
        use_case=GetWeatherUseCase(get_visualcrossing_provider()),
        store=store or JsonFileKeyValueStore(),
        geolocation=geolocation or ConfiguredGeolocationProvider(),
        **kwargs
    )
