"""
Hour Record Entity - hora normalizada da resposta do provider
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class HourRecord:
    """
    Registro horário pronto para exibição
    
    `datetime` é o instante canônico (ISO-8601): convertido de
    `datetimeEpoch` quando existe, senão o `datetime` da própria hora.
    """
    datetime: str
    temp: Optional[float] = None  # °C (unitGroup=metric)
    precipprob: Optional[float] = None  # % (0-100)
    conditions: Optional[str] = None
    
    def to_api_response(self) -> dict:
        return {
            'datetime': self.datetime,
            'temp': self.temp,
            'precipprob': self.precipprob,
            'conditions': self.conditions
        }
