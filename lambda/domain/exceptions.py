"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingApiKeyException(DomainException):
    """Raised when no API key is available for a provider call"""
    pass


class InvalidLocationException(DomainException):
    """Raised when a location query is empty"""
    pass


class GeolocationUnavailableException(DomainException):
    """Raised when the device position is denied, unavailable or timed out"""
    pass


class WeatherProviderException(DomainException):
    """Raised when the weather provider request fails"""
    def __init__(self, message: str, status_code: Optional[int] = None, details: dict = None):
        super().__init__(message, details)
        self.status_code = status_code


class QuotaExceededException(WeatherProviderException):
    """Raised when the provider answers HTTP 429 (daily cost exceeded)"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=429, details=details)
