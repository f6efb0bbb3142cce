"""
Domain Constants - constantes da aplicação centralizadas
"""
from shared.config import settings


class API:
    """Constantes da API Visual Crossing (Timeline)"""

    VISUALCROSSING_BASE_URL = settings.VISUALCROSSING_BASE_URL
    UNIT_GROUP = settings.UNIT_GROUP
    LANG = settings.LANG
    CONTENT_TYPE = "json"

    # Timeouts HTTP (segundos) - sem retry, erro sobe direto para a view
    HTTP_TIMEOUT_TOTAL = 15
    HTTP_TIMEOUT_CONNECT = 5
    HTTP_TIMEOUT_READ = 10
    HTTP_CONNECTION_LIMIT_PER_HOST = 10

    STATUS_QUOTA_EXCEEDED = 429


class Window:
    """Janela de consulta e recorte das horas"""

    HOURS_BEFORE = 24
    HOURS_AFTER = 24
    MAX_HOURS_PER_SIDE = 24
    TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


class View:
    """Constantes da WeatherView"""

    DEFAULT_LOCATION = settings.DEFAULT_LOCATION
    REFRESH_INTERVAL_SECONDS = settings.REFRESH_INTERVAL_SECONDS
    THEME_LIGHT = "light"
    THEME_DARK = "dark"

    # Geolocalização: single-shot, baixa precisão
    GEOLOCATION_HIGH_ACCURACY = False
    GEOLOCATION_TIMEOUT_SECONDS = 5.0
    GEOLOCATION_MAXIMUM_AGE_SECONDS = 60.0


class StorageKeys:
    """Chaves persistidas (equivalente ao localStorage do front)"""

    API_KEY = "weatherApiKey"
    LAST_LOCATION = "lastLocation"


class Messages:
    """Mensagens exibidas ao usuário"""

    NO_API_KEY = "Please enter your API_KEY first"
    NO_LOCATION = "Could not get location"
    QUOTA_EXCEEDED = (
        "⚠️ Maximum daily cost exceeded. Please create a Visual Crossing "
        "account and generate your own API Key."
    )
    GENERIC = "Error"
