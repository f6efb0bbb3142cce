"""Shared configuration"""
from .settings import DEFAULT_LOCATION, REFRESH_INTERVAL_SECONDS
from .logger_config import get_logger, logger

__all__ = ['DEFAULT_LOCATION', 'REFRESH_INTERVAL_SECONDS', 'get_logger', 'logger']
