"""
Configured Geolocation Provider - posição do dispositivo vinda da configuração
(DEVICE_LATITUDE / DEVICE_LONGITUDE), com semântica de timeout e maximum age
"""
import asyncio
import time
from typing import Awaitable, Callable, Optional, Tuple

from application.ports.output.geolocation_port import GeolocationOptions, IGeolocationProvider
from domain.exceptions import GeolocationUnavailableException
from domain.value_objects.coordinates import Coordinates
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

PositionSource = Callable[[], Awaitable[Coordinates]]


class ConfiguredGeolocationProvider(IGeolocationProvider):
    """
    Provider de posição atual
    
    - `source` é a corrotina que obtém a posição (padrão: coordenadas configuradas)
    - Posição em cache é reutilizada enquanto mais nova que maximum_age
    - Timeout aplicado a cada consulta à fonte
    """
    
    def __init__(
        self,
        source: Optional[PositionSource] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        self._source = source or self._read_configured_position
        self._clock = clock
        self._cached: Optional[Tuple[float, Coordinates]] = None
    
    async def get_current_position(self, options: GeolocationOptions = GeolocationOptions()) -> Coordinates:
        if self._cached is not None:
            cached_at, position = self._cached
            if self._clock() - cached_at <= options.maximum_age_seconds:
                logger.debug("Using cached position", position=str(position))
                return position
        
        try:
            position = await asyncio.wait_for(self._source(), timeout=options.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning("Geolocation timed out", timeout_seconds=options.timeout_seconds)
            raise GeolocationUnavailableException(
                "Geolocation timed out",
                details={"timeout_seconds": options.timeout_seconds}
            )
        
        self._cached = (self._clock(), position)
        return position
    
    @staticmethod
    async def _read_configured_position() -> Coordinates:
        latitude = settings.DEVICE_LATITUDE
        longitude = settings.DEVICE_LONGITUDE
        
        if not latitude or not longitude:
            raise GeolocationUnavailableException("Device position is not configured")
        
        try:
            return Coordinates(latitude=float(latitude), longitude=float(longitude))
        except ValueError:
            raise GeolocationUnavailableException(
                "Invalid device position",
                details={"latitude": latitude, "longitude": longitude}
            )
