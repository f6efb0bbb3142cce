"""
Value Object para a localização consultada
"""
from dataclasses import dataclass
from urllib.parse import quote

from domain.value_objects.coordinates import Coordinates

# Mesmo conjunto não-reservado do encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class LocationQuery:
    """
    Texto livre (cidade, endereço) ou par "lat,lng"
    
    O provider resolve ambiguidades; aqui só montamos o segmento de path.
    Queries criadas por `from_coordinates` vão sem encoding (vírgula e ponto
    já são seguros); texto livre é sempre percent-encoded.
    """
    text: str
    from_device: bool = False
    
    def to_path_segment(self) -> str:
        if self.from_device:
            return self.text
        return quote(self.text, safe=_URI_COMPONENT_SAFE)
    
    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> 'LocationQuery':
        return cls(text=str(Coordinates(latitude, longitude)), from_device=True)
