# mailverdict/verifier/catchall_checker.py
import asyncio
import logging
import random

LOG = logging.getLogger("mailverdict.verifier")

LIKELY_CATCH_ALL_DOMAINS = {
    "company.com", "business.com", "enterprise.com", "startup.com",
    "agency.com", "firm.com", "corp.com", "inc.com", "catchall.com",
}

LIKELY_CATCH_ALL_PROBABILITY = 0.7
CATCH_ALL_PROBABILITY = 0.2
DEFAULT_CATCH_ALL_DELAY = 0.8


async def is_catch_all(domain: str, rng: random.Random, delay: float = DEFAULT_CATCH_ALL_DELAY) -> bool:
    """
    Simulated catch-all probe. Domains on the likely list are catch-all
    70% of the time, everything else 20%.
    """
    await asyncio.sleep(delay)

    if domain in LIKELY_CATCH_ALL_DOMAINS:
        p = LIKELY_CATCH_ALL_PROBABILITY
    else:
        p = CATCH_ALL_PROBABILITY

    catch_all = rng.random() < p
    LOG.debug("catch-all probe domain=%s catch_all=%s", domain, catch_all)
    return catch_all
