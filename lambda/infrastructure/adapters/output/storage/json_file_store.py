"""
JSON File Store - armazenamento chave-valor persistido em arquivo
Equivalente ao localStorage do browser para weatherApiKey e lastLocation
"""
import json
import os
from pathlib import Path
from typing import Dict, Optional

from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class JsonFileKeyValueStore:
    """
    Store chave-valor em um único arquivo JSON
    
    - Lê o arquivo a cada get (outro processo pode ter escrito)
    - Escrita atômica via arquivo temporário + os.replace
    - Arquivo ausente ou corrompido é tratado como vazio
    - Falha de escrita é logada e set retorna False
    """
    
    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.STORAGE_PATH)
    
    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)
    
    def set(self, key: str, value: str) -> bool:
        data = self._read()
        data[key] = value
        return self._write(data)
    
    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read storage file, using empty store", path=str(self.path), error=str(e))
            return {}
        
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}
    
    def _write(self, data: Dict[str, str]) -> bool:
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("Failed to write storage file", path=str(self.path), error=str(e))
            return False
        return True


class InMemoryKeyValueStore:
    """Store em memória (testes e execução sem disco)"""
    
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
    
    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)
    
    def set(self, key: str, value: str) -> bool:
        self._data[key] = value
        return True
