"""
Configuração centralizada de logging para a aplicação
Configura o logger AWS Lambda Powertools com service name do Datadog
"""
import os
from typing import Optional

from aws_lambda_powertools import Logger


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger
    
    Args:
        service_name: Nome do serviço (se None, usa DD_SERVICE do ambiente)
        child: Se True, cria um child logger (herda chaves do logger principal)
    
    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = os.environ.get('DD_SERVICE', 'weather-current')
    
    level = os.environ.get('LOG_LEVEL', 'INFO')
    
    if child:
        return Logger(service=service_name, level=level, child=True)
    
    return Logger(service=service_name, level=level)


# Logger principal da aplicação
logger = get_logger()
