"""
Value Object para coordenadas geográficas
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas (graus decimais)
    
    Não valida faixa: valores fora de [-90, 90] / [-180, 180] seguem para
    o provider, que é quem rejeita.
    """
    latitude: float
    longitude: float
    
    def __str__(self) -> str:
        """Formato usado no path do provider e no lastLocation: "lat,lng" """
        return f"{self.latitude},{self.longitude}"
