"""
Aiohttp Session Manager - sessão HTTP compartilhada pelo provider
Reutiliza a sessão enquanto o event loop for o mesmo (warm starts na Lambda,
e todas as chamadas da WeatherView no mesmo loop)
"""
import asyncio
from typing import Optional

import aiohttp

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador singleton de sessão aiohttp
    
    - Uma sessão por event loop (asyncio.run cria loops novos)
    - Timeout total/conexão/leitura configurável
    
    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
        async with session.get(url) as response:
            data = await response.json()
    """
    
    _instance: Optional['AiohttpSessionManager'] = None
    
    def __init__(
        self,
        total_timeout: float = 15,
        connect_timeout: float = 5,
        sock_read_timeout: float = 10,
        limit_per_host: int = 10
    ):
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit_per_host = limit_per_host
        
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None
    
    @classmethod
    def get_instance(cls, **kwargs) -> 'AiohttpSessionManager':
        """
        Retorna instância singleton (kwargs só valem na primeira criação)
        """
        if cls._instance is None:
            cls._instance = cls(**kwargs)
            logger.info("AiohttpSessionManager singleton created", **kwargs)
        return cls._instance
    
    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp do loop atual (cria ou reutiliza)
        """
        loop_id = id(asyncio.get_running_loop())
        
        if (self._session is not None
                and not self._session.closed
                and self._session_loop_id == loop_id):
            return self._session
        
        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=loop_id
            )
            await self.close()
        
        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )
        connector = aiohttp.TCPConnector(limit_per_host=self.limit_per_host)
        
        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = loop_id
        logger.info("Aiohttp session created", loop_id=loop_id)
        
        return self._session
    
    async def close(self) -> None:
        """Fecha a sessão atual, se existir"""
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
                logger.info("Aiohttp session closed", loop_id=self._session_loop_id)
            except aiohttp.ClientError as e:
                logger.warning("Error closing aiohttp session", error=str(e))
        
        self._session = None
        self._session_loop_id = None


def get_aiohttp_session_manager(
    total_timeout: float = 15,
    connect_timeout: float = 5,
    sock_read_timeout: float = 10,
    limit_per_host: int = 10
) -> AiohttpSessionManager:
    """Factory para obter o gerenciador singleton"""
    return AiohttpSessionManager.get_instance(
        total_timeout=total_timeout,
        connect_timeout=connect_timeout,
        sock_read_timeout=sock_read_timeout,
        limit_per_host=limit_per_host
    )
