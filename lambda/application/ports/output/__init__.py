"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .weather_provider_port import IWeatherProvider
from .key_value_store_port import IKeyValueStore
from .geolocation_port import IGeolocationProvider, GeolocationOptions
