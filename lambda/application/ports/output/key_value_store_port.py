"""
Output Port: Interface para armazenamento chave-valor local
(equivalente ao localStorage do browser)
"""
from typing import Optional, Protocol


class IKeyValueStore(Protocol):
    """Interface para armazenamento de strings por chave"""
    
    def get(self, key: str) -> Optional[str]:
        """Retorna o valor salvo ou None"""
        ...
    
    def set(self, key: str, value: str) -> bool:
        """Salva (sobrescreve) o valor; False se não conseguiu persistir"""
        ...
