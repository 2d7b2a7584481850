"""Storage wiring and FastAPI store dependencies.

Learn: One store instance per record type for the lifetime of the
process. Route handlers receive them through Depends(get_*_store), the
same way a database-backed app would receive a session from get_db(), so
tests (or a real backend) can swap them with app.dependency_overrides.
"""

from mentorhub.db.models import Feedback, Session
from mentorhub.db.store import InMemoryStore, UserStore

user_store = UserStore()
session_store: InMemoryStore[Session] = InMemoryStore()
feedback_store: InMemoryStore[Feedback] = InMemoryStore()


def get_user_store() -> UserStore:
    return user_store


def get_session_store() -> InMemoryStore[Session]:
    return session_store


def get_feedback_store() -> InMemoryStore[Feedback]:
    return feedback_store
