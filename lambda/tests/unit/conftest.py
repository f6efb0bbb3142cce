"""
Configurações e fixtures compartilhadas para testes unitários
"""
import os

# Sem agente Datadog nos testes
os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

import pytest
from typing import Any, Dict, List, Optional

from domain.entities.hour_record import HourRecord
from domain.entities.weather_bundle import WeatherBundle
from infrastructure.adapters.output.storage.json_file_store import InMemoryKeyValueStore

# 2024-01-01T00:00:00Z
EPOCH_2024_01_01 = 1704067200


@pytest.fixture
def make_timeline_response():
    """
    Factory fixture para respostas Timeline do Visual Crossing
    
    Usage:
        def test_something(make_timeline_response):
            raw = make_timeline_response(hours_count=48)
    """
    def _make(
        hours_count: int = 48,
        start_epoch: int = EPOCH_2024_01_01,
        resolved_address: Optional[str] = 'Medellín, Antioquia, Colombia',
        timezone: Optional[str] = 'America/Bogota',
        current_conditions: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        days: List[Dict[str, Any]] = []
        for i in range(hours_count):
            epoch = start_epoch + i * 3600
            day_index = i // 24
            if len(days) <= day_index:
                days.append({'datetime': f'2024-01-{day_index + 1:02d}', 'hours': []})
            days[day_index]['hours'].append({
                'datetime': f'{i % 24:02d}:00:00',
                'datetimeEpoch': epoch,
                'temp': 15.0 + i,
                'precipprob': float(i % 100),
                'conditions': 'Parcialmente nublado'
            })
        
        return {
            'resolvedAddress': resolved_address,
            'timezone': timezone,
            'currentConditions': current_conditions or {
                'temp': 22.4,
                'windspeed': 7.2,
                'precipprob': 10.0,
                'conditions': 'Parcialmente nublado',
                'datetime': '12:00:00'
            },
            'days': days
        }
    
    return _make


@pytest.fixture
def make_bundle():
    """Factory fixture para WeatherBundle"""
    def _make(
        resolved_address: Optional[str] = 'Medellín, Antioquia, Colombia',
        temp: float = 22.0
    ) -> WeatherBundle:
        return WeatherBundle(
            resolved_address=resolved_address,
            timezone='America/Bogota',
            current_conditions={'temp': temp, 'windspeed': 5.0},
            hours_prev_24=[HourRecord(datetime='2024-01-01T10:00:00Z', temp=temp)],
            hours_next_24=[HourRecord(datetime='2024-01-01T14:00:00Z', temp=temp + 1)]
        )
    
    return _make


@pytest.fixture
def memory_store():
    return InMemoryKeyValueStore()
