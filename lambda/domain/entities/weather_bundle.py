"""
Weather Bundle Entity - dados normalizados para a view
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.entities.hour_record import HourRecord


@dataclass
class WeatherBundle:
    """
    Bundle exibido pela view
    
    Invariantes:
    - hours_prev_24 e hours_next_24 em ordem crescente, no máximo 24 cada
    - hours_prev_24 <= instante de split < hours_next_24
    """
    resolved_address: Optional[str] = None
    timezone: Optional[str] = None
    current_conditions: Optional[Dict[str, Any]] = None
    hours_prev_24: List[HourRecord] = field(default_factory=list)
    hours_next_24: List[HourRecord] = field(default_factory=list)
    
    @property
    def has_data(self) -> bool:
        return bool(self.current_conditions or self.hours_prev_24 or self.hours_next_24)
    
    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API (camelCase, como o front espera)
        """
        return {
            'resolvedAddress': self.resolved_address,
            'timezone': self.timezone,
            'currentConditions': self.current_conditions,
            'hoursPrev24': [h.to_api_response() for h in self.hours_prev_24],
            'hoursNext24': [h.to_api_response() for h in self.hours_next_24]
        }
