"""Application DTOs - Data Transfer Objects para contratos de saída"""

from application.dtos.responses import ViewState

__all__ = ['ViewState']
