"""
Output Port: Interface para a posição atual do dispositivo
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from domain.constants import View
from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class GeolocationOptions:
    """Opções de consulta single-shot (mesmas do navigator.geolocation)"""
    high_accuracy: bool = View.GEOLOCATION_HIGH_ACCURACY
    timeout_seconds: float = View.GEOLOCATION_TIMEOUT_SECONDS
    maximum_age_seconds: float = View.GEOLOCATION_MAXIMUM_AGE_SECONDS


class IGeolocationProvider(ABC):
    """Interface para obter a posição atual"""
    
    @abstractmethod
    async def get_current_position(self, options: GeolocationOptions = GeolocationOptions()) -> Coordinates:
        """
        Retorna posição atual
        
        Raises:
            GeolocationUnavailableException: Negado, indisponível ou timeout
        """
        pass
