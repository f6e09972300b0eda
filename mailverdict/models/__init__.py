from .status import VerificationStatus
from .card import (
    AccountPanel,
    DomainPanel,
    FormState,
    ProviderPanel,
    StatusDisplay,
    VerificationCard,
    VerifyRequest,
)

__all__ = [
    "VerificationStatus",
    "StatusDisplay",
    "DomainPanel",
    "AccountPanel",
    "ProviderPanel",
    "VerificationCard",
    "VerifyRequest",
    "FormState",
]
