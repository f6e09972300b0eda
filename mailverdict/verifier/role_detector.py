# mailverdict/verifier/role_detector.py
from .syntax_engine import local_part

ROLE_PREFIXES = (
    "info", "admin", "support", "contact", "help", "sales",
    "billing", "office", "mail", "webmaster", "hostmaster",
    "postmaster", "team", "marketing", "hello", "service",
)


def is_role_email(email: str) -> bool:
    local = local_part(email)
    return any(local == prefix or local.startswith(prefix + ".") for prefix in ROLE_PREFIXES)
