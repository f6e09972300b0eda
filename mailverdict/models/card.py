# mailverdict/models/card.py
from typing import Optional

from pydantic import BaseModel, Field

from .status import VerificationStatus


class VerifyRequest(BaseModel):
    email: str = ""


class StatusDisplay(BaseModel):
    """One row of the status display table."""

    text: str
    color: str
    reason: str
    reason_color: str
    description: str
    icon: Optional[str] = None
    icon_color: Optional[str] = None


class DomainPanel(BaseModel):
    name: str = ""
    accept_all: bool = False
    disposable: bool = False
    free: bool = False


class AccountPanel(BaseModel):
    role: bool = False
    disabled: bool = False
    full_mailbox: bool = False


class ProviderPanel(BaseModel):
    domain: str


class VerificationCard(BaseModel):
    """
    Everything the result panel shows for one submission.
    `display`/panels are None when there is no status to show (empty input).
    """

    email: str
    domain: str = ""
    status: VerificationStatus = VerificationStatus.none
    error_message: str = ""
    display: Optional[StatusDisplay] = None
    domain_panel: Optional[DomainPanel] = None
    account_panel: Optional[AccountPanel] = None
    provider_panel: Optional[ProviderPanel] = None


class FormState(BaseModel):
    is_checking: bool = False
    card: Optional[VerificationCard] = None
    completed: int = Field(default=0, description="Submissions resolved so far")
