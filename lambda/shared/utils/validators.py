"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Optional, Type

from domain.exceptions import InvalidLocationException, MissingApiKeyException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""
    
    @staticmethod
    def validate_not_empty(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """
        Valida se string não está vazia
        
        Args:
            value: String a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar
        
        Returns:
            String validada e trimmed
        
        Raises:
            exception_class: Se string vazia ou None
        """
        if not value or not value.strip():
            raise exception_class(f"{param_name} cannot be empty")
        return value.strip()
    
    @staticmethod
    def validate_float(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Converte string numérica para float (sem validar faixa)
        
        Raises:
            exception_class: Se não for numérica
        """
        trimmed = GenericValidator.validate_not_empty(value, param_name, exception_class)
        try:
            return float(trimmed)
        except ValueError:
            raise exception_class(f"Invalid {param_name} format: {value}")


class ApiKeyValidator:
    """Validate provider API key (only non-emptiness)"""
    
    @staticmethod
    def validate(api_key: Optional[str]) -> str:
        """
        Raises:
            MissingApiKeyException: If key is empty
        """
        return GenericValidator.validate_not_empty(
            value=api_key,
            param_name="api_key",
            exception_class=MissingApiKeyException
        )


class LocationValidator:
    """Validate location query text"""
    
    @staticmethod
    def validate(location: Optional[str]) -> str:
        """
        Raises:
            InvalidLocationException: If location is empty
        """
        return GenericValidator.validate_not_empty(
            value=location,
            param_name="location",
            exception_class=InvalidLocationException
        )
