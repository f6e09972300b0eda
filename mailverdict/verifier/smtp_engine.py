# mailverdict/verifier/smtp_engine.py
import asyncio
import logging
import random

from .syntax_engine import local_part

LOG = logging.getLogger("mailverdict.verifier")

# Local parts that rarely belong to a real mailbox
GENERIC_LOCAL_PATTERNS = (
    "test", "example", "user", "info", "admin", "webmaster",
    "support", "noreply", "no-reply", "invalid",
)

GENERIC_MAILBOX_PROBABILITY = 0.2
MAILBOX_PROBABILITY = 0.85
DEFAULT_MAILBOX_DELAY = 1.0


async def mailbox_exists(email: str, rng: random.Random, delay: float = DEFAULT_MAILBOX_DELAY) -> bool:
    """
    Stand-in for an RCPT TO check; no connection is opened.
    Returns (after `delay`) whether the mailbox is reported to exist.
    """
    await asyncio.sleep(delay)

    local = local_part(email)
    if any(pattern in local for pattern in GENERIC_LOCAL_PATTERNS):
        p = GENERIC_MAILBOX_PROBABILITY
    else:
        p = MAILBOX_PROBABILITY

    exists = rng.random() < p
    LOG.debug("mailbox check local=%s exists=%s", local, exists)
    return exists
