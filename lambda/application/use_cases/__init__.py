"""Application Use Cases - 100% ASYNC com provider desacoplado"""
from .get_weather_use_case import GetWeatherUseCase

__all__ = ['GetWeatherUseCase']
