"""
DateTime Parser Utility
Parsing de timestamps do provider para instantes comparáveis
"""
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DateTimeParser:
    """Converte timestamps ISO/epoch em datetimes aware"""
    
    @staticmethod
    def resolve_timezone(name: Optional[str]) -> Optional[ZoneInfo]:
        """
        Resolve nome IANA (ex: "America/Bogota") em ZoneInfo
        
        Returns:
            ZoneInfo ou None se vazio/desconhecido
        """
        if not name or not isinstance(name, str):
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone, using local time", timezone=name)
            return None
    
    @staticmethod
    def to_aware(value: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
        """
        Garante timezone: naive é interpretado em `tz` ou, sem tz,
        no fuso local da máquina (mesma semântica do browser)
        """
        if value.tzinfo is not None:
            return value
        if tz is not None:
            return value.replace(tzinfo=tz)
        return value.astimezone()
    
    @staticmethod
    def epoch_to_iso(epoch_seconds: float) -> str:
        """
        Epoch (segundos) -> instante ISO-8601 UTC
        
        Example:
            >>> DateTimeParser.epoch_to_iso(1704103200)
            '2024-01-01T10:00:00Z'
        """
        instant = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
        return instant.isoformat(timespec='seconds').replace('+00:00', 'Z')
    
    @staticmethod
    def parse_instant(value: Optional[str], tz: Optional[ZoneInfo] = None) -> Optional[datetime]:
        """
        Parse de string ISO-8601 (com ou sem offset, aceita sufixo Z)
        
        Args:
            value: Timestamp ISO-8601
            tz: Fuso para timestamps sem offset
        
        Returns:
            Datetime aware ou None se não for parseável
        """
        if not value or not isinstance(value, str):
            return None
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return DateTimeParser.to_aware(parsed, tz)
