# Core modules

from .config import settings, get_settings, Settings
from .session import SessionManager, UserSession, session_manager
from .storage import KeyValueStore, InMemoryKeyValueStore

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "SessionManager",
    "UserSession",
    "session_manager",
    "KeyValueStore",
    "InMemoryKeyValueStore",
]
