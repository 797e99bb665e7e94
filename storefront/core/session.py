"""Session management for storefront visitors"""

import uuid
from datetime import datetime
from typing import Callable, Optional
from dataclasses import dataclass, field

from ..models.cart import Cart
from .config import settings
from .storage import KeyValueStore, InMemoryKeyValueStore


@dataclass
class UserSession:
    """Browser session: the visitor's cart and session storage"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    cart: Cart = field(default_factory=Cart)
    storage: KeyValueStore = field(default_factory=InMemoryKeyValueStore)

    def touch(self) -> None:
        """Mark the session as recently used"""
        self.updated_at = datetime.utcnow()


class SessionManager:
    """Manages visitor sessions"""

    def __init__(
        self,
        storage_factory: Callable[[], KeyValueStore] = InMemoryKeyValueStore,
        max_age_hours: int = 24,
    ):
        self.sessions: dict[str, UserSession] = {}
        self.max_age_hours = max_age_hours
        self._storage_factory = storage_factory

    def create_session(self) -> UserSession:
        """Create a new session, dropping sessions idle past max_age_hours"""
        self.cleanup_old_sessions(self.max_age_hours)
        now = datetime.utcnow()
        session = UserSession(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            storage=self._storage_factory(),
        )
        self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> Optional[UserSession]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def get_or_create_session(self, session_id: Optional[str] = None) -> UserSession:
        """Get existing session or create new one"""
        if session_id and session_id in self.sessions:
            session = self.sessions[session_id]
            session.touch()
            return session
        return self.create_session()

    def delete_session(self, session_id: str) -> bool:
        """Delete a session"""
        session = self.sessions.pop(session_id, None)
        if session is None:
            return False
        session.storage.clear()
        return True

    def cleanup_old_sessions(self, max_age_hours: int = 24) -> int:
        """Remove sessions older than max_age_hours"""
        now = datetime.utcnow()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            self.delete_session(sid)
        return len(old_sessions)


# Singleton instance
session_manager = SessionManager(max_age_hours=settings.session_max_age_hours)
