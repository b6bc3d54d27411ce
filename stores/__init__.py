from .record_store import InMemoryRecordStore
from .verification_store import InMemoryVerificationStore

__all__ = [
    "InMemoryRecordStore",
    "InMemoryVerificationStore",
]
