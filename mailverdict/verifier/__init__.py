# mailverdict/verifier/__init__.py

from .syntax_engine import (
    extract_domain,
    is_syntax_valid,
    local_part,
)

from .dns_engine import has_mx_records
from .smtp_engine import mailbox_exists
from .catchall_checker import is_catch_all
from .role_detector import is_role_email
from .provider_profiles import identify_provider, is_free_provider
from .pipeline import VerificationPipeline, verify_email

__all__ = [
    "extract_domain",
    "is_syntax_valid",
    "local_part",
    "has_mx_records",
    "mailbox_exists",
    "is_catch_all",
    "is_role_email",
    "identify_provider",
    "is_free_provider",
    "VerificationPipeline",
    "verify_email",
]
