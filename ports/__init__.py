from .repos import RecordRepoPort, RecordSinkPort, VerificationStorePort

__all__ = [
    "RecordRepoPort",
    "RecordSinkPort",
    "VerificationStorePort",
]
