# mailverdict/services/form_controller.py
import logging
from typing import Optional

from ..models.card import FormState, VerificationCard
from ..models.status import VerificationStatus
from ..verifier.pipeline import VerificationPipeline
from ..verifier.syntax_engine import extract_domain, is_syntax_valid
from . import presentation

LOG = logging.getLogger("mailverdict.form")

EMPTY_EMAIL_MESSAGE = "Email cannot be empty"
VERIFICATION_ERROR_MESSAGE = "An error occurred during verification"


def build_card(email: str, status: VerificationStatus, domain: str = "", error_message: str = "") -> VerificationCard:
    display = presentation.display_for(status)
    if display is None:
        return VerificationCard(email=email, domain=domain, status=status, error_message=error_message)

    return VerificationCard(
        email=email,
        domain=domain,
        status=status,
        error_message=error_message,
        display=display,
        domain_panel=presentation.domain_panel(status, domain),
        account_panel=presentation.account_panel(status),
        provider_panel=presentation.provider_panel(domain) if domain else None,
    )


class FormController:
    """
    Holds the state of the verification form and runs the pipeline on submit.

    Overlapping submissions are not fenced: each one overwrites the displayed
    card when it resolves, so a slower earlier request can replace a newer
    result, and the first one to finish clears `is_checking`.
    """

    def __init__(self, pipeline: Optional[VerificationPipeline] = None):
        self.pipeline = pipeline or VerificationPipeline()
        self.domain = ""
        self.is_checking = False
        self.card: Optional[VerificationCard] = None
        self.completed = 0

    async def check_email(self, email: str) -> VerificationCard:
        self.is_checking = True

        status = VerificationStatus.none
        domain = ""
        error_message = ""

        try:
            if not email or not email.strip():
                error_message = EMPTY_EMAIL_MESSAGE
            elif not is_syntax_valid(email):
                status = VerificationStatus.invalid
            else:
                domain = extract_domain(email) or ""
                self.domain = domain
                status = await self.pipeline.run(email)
                if status == VerificationStatus.none:
                    error_message = EMPTY_EMAIL_MESSAGE
        except Exception:
            LOG.exception("Verification failed for email=%r", email)
            error_message = VERIFICATION_ERROR_MESSAGE
            status = VerificationStatus.unknown
        finally:
            self.is_checking = False

        card = build_card(email, status, domain=domain, error_message=error_message)

        self.domain = domain
        self.card = card
        self.completed += 1
        return card

    def state(self) -> FormState:
        return FormState(is_checking=self.is_checking, card=self.card, completed=self.completed)
