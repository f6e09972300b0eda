# mailverdict/verifier/syntax_engine.py
import re
from typing import Optional

# Local part: dot-separated atoms or a quoted string.
# Domain: bracketed IPv4 literal or labels ending in a 2+ letter TLD.
EMAIL_REGEX = re.compile(
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|("[^\n\r\u2028\u2029]+"))'
    r"@"
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)


def is_syntax_valid(addr: str) -> bool:
    if not addr or not addr.strip():
        return False
    return EMAIL_REGEX.fullmatch(addr.lower()) is not None


def extract_domain(addr: str) -> Optional[str]:
    """Lower-cased text after the first '@', or None if there is no '@'."""
    if not addr:
        return None
    _, sep, domain = addr.partition("@")
    if not sep:
        return None
    return domain.lower()


def local_part(addr: str) -> str:
    if not addr:
        return ""
    return addr.partition("@")[0].lower()
