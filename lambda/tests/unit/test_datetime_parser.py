"""
Testes Unitários - DateTimeParser
"""
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from shared.utils.datetime_parser import DateTimeParser


class TestDateTimeParser:
    """Testes para DateTimeParser"""
    
    def test_epoch_to_iso(self):
        assert DateTimeParser.epoch_to_iso(1704103200) == '2024-01-01T10:00:00Z'
    
    def test_parse_instant_with_z_suffix(self):
        result = DateTimeParser.parse_instant('2024-01-01T10:00:00Z')
        
        assert result == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
    
    def test_parse_instant_with_offset(self):
        result = DateTimeParser.parse_instant('2024-01-01T10:00:00-05:00')
        
        assert result.utcoffset() == timedelta(hours=-5)
    
    def test_parse_instant_naive_uses_given_timezone(self):
        tz = ZoneInfo('America/Bogota')
        result = DateTimeParser.parse_instant('2024-01-01T10:00:00', tz)
        
        assert result.tzinfo == tz
        assert result.astimezone(timezone.utc).hour == 15
    
    def test_parse_instant_naive_without_timezone_is_local(self):
        result = DateTimeParser.parse_instant('2024-01-01T10:00:00')
        
        assert result.tzinfo is not None
        assert result.replace(tzinfo=None) == datetime(2024, 1, 1, 10, 0)
    
    def test_parse_instant_invalid(self):
        assert DateTimeParser.parse_instant('not-a-date') is None
        assert DateTimeParser.parse_instant('10:00:00') is None
        assert DateTimeParser.parse_instant('') is None
        assert DateTimeParser.parse_instant(None) is None
        assert DateTimeParser.parse_instant(12345) is None
    
    def test_resolve_timezone(self):
        assert DateTimeParser.resolve_timezone('America/Bogota') == ZoneInfo('America/Bogota')
        assert DateTimeParser.resolve_timezone('Not/AZone') is None
        assert DateTimeParser.resolve_timezone(None) is None
    
    def test_to_aware_keeps_aware(self):
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)
        
        assert DateTimeParser.to_aware(value, ZoneInfo('America/Bogota')) is value
