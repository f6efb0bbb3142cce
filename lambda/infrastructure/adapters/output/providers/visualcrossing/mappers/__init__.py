"""Visual Crossing mappers"""
from infrastructure.adapters.output.providers.visualcrossing.mappers.visualcrossing_data_mapper import (
    VisualCrossingDataMapper
)

__all__ = ['VisualCrossingDataMapper']
