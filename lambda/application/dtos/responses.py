"""Response DTOs - Contratos de saída"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from domain.constants import View
from domain.entities.weather_bundle import WeatherBundle


@dataclass(frozen=True)
class ViewState:
    """
    Snapshot imutável do estado da WeatherView, entregue aos listeners
    """
    query: str = ""
    loading: bool = False
    error: Optional[str] = None
    data: Optional[WeatherBundle] = None
    api_key: str = ""
    theme: str = View.THEME_LIGHT
    
    @property
    def has_data(self) -> bool:
        return self.data is not None
    
    def to_api_response(self) -> Dict[str, Any]:
        """Formato para o front (nunca expõe a API key)"""
        return {
            'query': self.query,
            'loading': self.loading,
            'error': self.error,
            'hasData': self.has_data,
            'hasApiKey': bool(self.api_key),
            'theme': self.theme,
            'data': self.data.to_api_response() if self.data else None
        }
