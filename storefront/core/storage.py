"""Session-scoped key-value storage"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """String key-value storage scoped to one browser session"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value stored under key"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored value"""


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value storage"""

    def __init__(self):
        self.values: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def clear(self) -> None:
        self.values.clear()
