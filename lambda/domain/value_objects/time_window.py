"""
Value Object para a janela de consulta (24h antes / 24h depois de agora)
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from domain.constants import Window


@dataclass(frozen=True)
class TimeWindow:
    """
    Janela [now - 24h, now + 24h] em ISO-8601 com precisão de segundos,
    sem offset e sem fração (ex: "2024-01-01T12:00:00")
    
    Sempre calculada no momento da chamada; nunca reutilizar entre requests.
    """
    start: str
    end: str
    
    @classmethod
    def around(cls, now: Optional[datetime] = None) -> 'TimeWindow':
        """
        Cria a janela ancorada em `now` (padrão: relógio UTC atual)
        
        Args:
            now: Instante de referência (aware é convertido para UTC)
        
        Returns:
            TimeWindow com start < now < end e end - start == 48h
        """
        if now is None:
            now = datetime.now(tz=timezone.utc)
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc).replace(tzinfo=None)
        now = now.replace(microsecond=0)
        
        start = now - timedelta(hours=Window.HOURS_BEFORE)
        end = now + timedelta(hours=Window.HOURS_AFTER)
        
        return cls(
            start=start.strftime(Window.TIMESTAMP_FORMAT),
            end=end.strftime(Window.TIMESTAMP_FORMAT)
        )
    
    def duration(self) -> timedelta:
        """Duração da janela (48h por construção)"""
        return (
            datetime.strptime(self.end, Window.TIMESTAMP_FORMAT)
            - datetime.strptime(self.start, Window.TIMESTAMP_FORMAT)
        )
