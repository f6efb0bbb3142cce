"""
Configurações centralizadas da aplicação
"""
import os

# API de Clima (Visual Crossing Timeline)
VISUALCROSSING_BASE_URL = os.environ.get(
    'VISUALCROSSING_BASE_URL',
    'https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline'
)
UNIT_GROUP = os.environ.get('UNIT_GROUP', 'metric')
LANG = os.environ.get('LANG_CODE', 'es')

# Chave padrão (opcional) - usada pelo handler HTTP quando o header não vem
WEATHER_API_KEY = os.environ.get('WEATHER_API_KEY', '')

# Localização padrão quando não há última localização salva
DEFAULT_LOCATION = os.environ.get('DEFAULT_LOCATION', 'Medellín')

# Auto-refresh da view (segundos)
REFRESH_INTERVAL_SECONDS = int(os.environ.get('REFRESH_INTERVAL_SECONDS', '300'))

# Armazenamento local (equivalente ao localStorage)
STORAGE_PATH = os.environ.get(
    'STORAGE_PATH',
    os.path.join(os.path.expanduser('~'), '.weather-current', 'storage.json')
)

# Posição do dispositivo (opcional)
DEVICE_LATITUDE = os.environ.get('DEVICE_LATITUDE')
DEVICE_LONGITUDE = os.environ.get('DEVICE_LONGITUDE')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
