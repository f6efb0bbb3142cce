"""Visual Crossing Provider Package"""

from infrastructure.adapters.output.providers.visualcrossing.visualcrossing_provider import (
    VisualCrossingProvider,
    get_visualcrossing_provider
)

__all__ = ['VisualCrossingProvider', 'get_visualcrossing_provider']
