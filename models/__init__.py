from .company_record import CompanyRecord, SocialMedia
from .import_result import ImportResult, RowWarning
from .verification import VerificationAction, VerificationEvent

__all__ = [
    "CompanyRecord",
    "SocialMedia",
    "ImportResult",
    "RowWarning",
    "VerificationAction",
    "VerificationEvent",
]
