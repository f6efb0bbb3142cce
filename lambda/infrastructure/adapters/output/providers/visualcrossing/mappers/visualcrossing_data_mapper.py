"""
Visual Crossing Data Mapper - Transforma a resposta Timeline em WeatherBundle
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo

from domain.constants import Window
from domain.entities.hour_record import HourRecord
from domain.entities.weather_bundle import WeatherBundle
from shared.utils.datetime_parser import DateTimeParser
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

_TIME_ONLY_PATTERN = re.compile(r'^\d{2}:\d{2}(:\d{2})?$')


class VisualCrossingDataMapper:
    """
    Mapper para transformar respostas da API Visual Crossing em entities
    
    Função pura: nenhum estado entre chamadas, nenhum I/O.
    """
    
    @staticmethod
    def map_response_to_bundle(
        raw: Optional[Dict[str, Any]],
        now: Optional[datetime] = None
    ) -> WeatherBundle:
        """
        Mapeia resposta Timeline para WeatherBundle
        
        Flow:
        1. Achata days[].hours[] em uma sequência
        2. Resolve o instante canônico de cada hora (datetimeEpoch > datetime)
        3. Ordena crescente (sort estável, empates mantêm a ordem original)
        4. Captura o instante de split uma única vez
        5. hours_prev_24 = últimas 24 com instante <= split
           hours_next_24 = primeiras 24 com instante > split
        6. resolvedAddress, timezone e currentConditions passam sem alteração
        
        Horas com timestamp não parseável são descartadas antes da ordenação.
        
        Args:
            raw: Resposta JSON do provider
            now: Instante de split (padrão: agora)
        
        Returns:
            WeatherBundle
        """
        raw = raw if isinstance(raw, dict) else {}
        tz = DateTimeParser.resolve_timezone(raw.get('timezone'))
        
        split_instant = DateTimeParser.to_aware(now, tz) if now is not None else datetime.now().astimezone()
        
        hours = VisualCrossingDataMapper._map_hours(raw.get('days'), tz)
        hours.sort(key=lambda item: item[0])
        
        prev = [record for instant, record in hours if instant <= split_instant]
        nxt = [record for instant, record in hours if instant > split_instant]
        
        return WeatherBundle(
            resolved_address=raw.get('resolvedAddress'),
            timezone=raw.get('timezone'),
            current_conditions=raw.get('currentConditions'),
            hours_prev_24=prev[-Window.MAX_HOURS_PER_SIDE:],
            hours_next_24=nxt[:Window.MAX_HOURS_PER_SIDE]
        )
    
    @staticmethod
    def _map_hours(days: Any, tz: Optional[ZoneInfo]) -> List[Tuple[datetime, HourRecord]]:
        """Achata days[].hours[] em pares (instante, HourRecord)"""
        if not isinstance(days, list):
            return []
        
        mapped = []
        for day in days:
            if not isinstance(day, dict):
                continue
            day_date = day.get('datetime')
            hours = day.get('hours')
            if not isinstance(hours, list):
                continue
            
            for hour in hours:
                if not isinstance(hour, dict):
                    continue
                
                timestamp = VisualCrossingDataMapper.resolve_timestamp(hour, day_date)
                instant = DateTimeParser.parse_instant(timestamp, tz)
                if instant is None:
                    logger.warning(
                        "Failed to parse hour timestamp, skipping",
                        timestamp=timestamp,
                        day=day_date
                    )
                    continue
                
                mapped.append((instant, VisualCrossingDataMapper.map_hour(hour, timestamp)))
        
        return mapped
    
    @staticmethod
    def resolve_timestamp(hour: Dict[str, Any], day_date: Optional[str] = None) -> Optional[str]:
        """
        Instante canônico da hora
        
        - datetimeEpoch (segundos) → ISO-8601 UTC
        - datetime completo → como está
        - datetime só com hora ("10:00:00") → prefixado com a data do dia
        - sem nenhum dos dois → datetime do dia
        """
        epoch = hour.get('datetimeEpoch')
        if epoch is not None:
            try:
                return DateTimeParser.epoch_to_iso(float(epoch))
            except (TypeError, ValueError, OverflowError, OSError):
                logger.warning("Invalid datetimeEpoch", datetime_epoch=epoch)
        
        value = hour.get('datetime')
        if isinstance(value, str) and value:
            if day_date and _TIME_ONLY_PATTERN.match(value):
                return f"{day_date}T{value}"
            return value
        
        return day_date
    
    @staticmethod
    def map_hour(hour: Dict[str, Any], timestamp: str) -> HourRecord:
        """Mapeia uma hora raw para HourRecord (temp com fallback para tempC)"""
        temp = hour.get('temp')
        if temp is None:
            temp = hour.get('tempC')
        
        return HourRecord(
            datetime=timestamp,
            temp=temp,
            precipprob=hour.get('precipprob'),
            conditions=hour.get('conditions')
        )
