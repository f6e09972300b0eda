# mailverdict/verifier/pipeline.py
import logging
import random
from typing import Optional

from ..models.status import MAILBOX_FAILURE_STATUSES, VerificationStatus
from .catchall_checker import DEFAULT_CATCH_ALL_DELAY, is_catch_all
from .dns_engine import DEFAULT_MX_DELAY, has_mx_records
from .role_detector import is_role_email
from .smtp_engine import DEFAULT_MAILBOX_DELAY, mailbox_exists
from .syntax_engine import extract_domain, is_syntax_valid

LOG = logging.getLogger("mailverdict.verifier")


class VerificationPipeline:
    """
    Runs the checks in a fixed order and stops at the first decisive one:

      empty -> none, bad syntax -> invalid, no MX -> invalid,
      role prefix -> role, catch-all -> catchAll,
      missing mailbox -> random pick of invalid/inboxFull/disabled,
      otherwise safe.

    The simulated checks run one after another and all draw from `rng`.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        mx_delay: float = DEFAULT_MX_DELAY,
        catch_all_delay: float = DEFAULT_CATCH_ALL_DELAY,
        mailbox_delay: float = DEFAULT_MAILBOX_DELAY,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.mx_delay = mx_delay
        self.catch_all_delay = catch_all_delay
        self.mailbox_delay = mailbox_delay

    async def run(self, email: str) -> VerificationStatus:
        if not email or not email.strip():
            return VerificationStatus.none

        if not is_syntax_valid(email):
            LOG.info("verify email=%r status=invalid (syntax)", email)
            return VerificationStatus.invalid

        # syntax passed, so an '@' is present
        domain = extract_domain(email)

        if not await has_mx_records(domain, self.rng, delay=self.mx_delay):
            LOG.info("verify email=%r status=invalid (no mx)", email)
            return VerificationStatus.invalid

        if is_role_email(email):
            LOG.info("verify email=%r status=role", email)
            return VerificationStatus.role

        if await is_catch_all(domain, self.rng, delay=self.catch_all_delay):
            LOG.info("verify email=%r status=catchAll", email)
            return VerificationStatus.catch_all

        if not await mailbox_exists(email, self.rng, delay=self.mailbox_delay):
            status = self.rng.choice(MAILBOX_FAILURE_STATUSES)
            LOG.info("verify email=%r status=%s (mailbox)", email, status.value)
            return status

        LOG.info("verify email=%r status=safe", email)
        return VerificationStatus.safe


async def verify_email(email: str, rng: Optional[random.Random] = None) -> VerificationStatus:
    """One-shot verification with the default latencies."""
    return await VerificationPipeline(rng=rng).run(email)
