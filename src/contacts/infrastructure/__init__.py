"""Infrastructure layer: concrete implementations of application ports."""

from contacts.infrastructure.memory_repository import InMemoryContactsRepository
from contacts.infrastructure.persistence.redis_repository import RedisContactsRepository

__all__ = [
    "InMemoryContactsRepository",
    "RedisContactsRepository",
]
