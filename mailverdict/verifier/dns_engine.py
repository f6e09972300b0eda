# mailverdict/verifier/dns_engine.py
import asyncio
import logging
import random

LOG = logging.getLogger("mailverdict.verifier")

# Providers known to publish MX records
COMMON_MX_DOMAINS = {
    "gmail.com", "yahoo.com", "hotmail.com", "outlook.com",
    "aol.com", "icloud.com", "protonmail.com", "mail.com",
    "zoho.com", "yandex.com", "gmx.com", "example.com",
}

MX_PRESENCE_PROBABILITY = 0.7
DEFAULT_MX_DELAY = 0.5


async def has_mx_records(domain: str, rng: random.Random, delay: float = DEFAULT_MX_DELAY) -> bool:
    """
    Simulated MX lookup. No resolver is queried: after `delay` seconds the
    allow-listed providers always answer True, anything else answers True
    with probability 0.7.
    """
    await asyncio.sleep(delay)

    if domain in COMMON_MX_DOMAINS:
        LOG.debug("MX lookup domain=%s allow-listed", domain)
        return True

    found = rng.random() < MX_PRESENCE_PROBABILITY
    LOG.debug("MX lookup domain=%s found=%s", domain, found)
    return found
