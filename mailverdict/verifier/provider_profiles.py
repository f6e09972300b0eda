# mailverdict/verifier/provider_profiles.py
from typing import Optional

FREE_PROVIDERS = {"gmail.com", "yahoo.com", "hotmail.com", "outlook.com"}

# substring -> provider domain, first match wins
PROVIDER_MARKERS = (
    ("gmail", "google.com"),
    ("yahoo", "yahoo.com"),
    ("hotmail", "microsoft.com"),
    ("outlook", "microsoft.com"),
)


def identify_provider(domain: str) -> Optional[str]:
    if not domain:
        return None
    d = domain.lower()
    for marker, provider in PROVIDER_MARKERS:
        if marker in d:
            return provider
    return d


def is_free_provider(domain: str) -> bool:
    if not domain:
        return False
    return domain.lower() in FREE_PROVIDERS
