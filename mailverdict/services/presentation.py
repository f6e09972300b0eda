# mailverdict/services/presentation.py
# Status -> display strings/colors, plus the derived info panels.
from typing import Dict, Optional

from ..models.card import AccountPanel, DomainPanel, ProviderPanel, StatusDisplay
from ..models.status import VerificationStatus
from ..verifier.provider_profiles import identify_provider, is_free_provider

GREEN, BLUE, AMBER, RED, GRAY = "green", "blue", "amber", "red", "gray"

ICON_CHECK = "check-circle"
ICON_ALERT = "alert-circle"
ICON_X = "x-circle"


def _display(text, color, reason, reason_color, description, icon, icon_color=None) -> StatusDisplay:
    return StatusDisplay(
        text=text,
        color=f"text-{color}-500",
        reason=reason,
        reason_color=f"bg-{reason_color}-100 text-{reason_color}-800",
        description=description,
        icon=icon,
        icon_color=f"text-{icon_color or color}-500",
    )


STATUS_DISPLAY: Dict[VerificationStatus, StatusDisplay] = {
    VerificationStatus.safe: _display(
        "Deliverable", GREEN, "ACCEPT EMAIL", GREEN,
        "You can safely send emails to this address, we have confirmation that the address does exist.",
        ICON_CHECK,
    ),
    VerificationStatus.role: _display(
        "Deliverable (Role)", BLUE, "ACCEPT EMAIL", GREEN,
        "This is a valid company role-related email address (not a personal one).",
        ICON_CHECK, GREEN,
    ),
    VerificationStatus.catch_all: _display(
        "Deliverable (Catch-All)", BLUE, "PROCEED WITH CAUTION", BLUE,
        "This domain accepts all emails, even if the specific address doesn't exist.",
        ICON_CHECK,
    ),
    VerificationStatus.disposable: _display(
        "Risky (Disposable)", AMBER, "TEMPORARY EMAIL", AMBER,
        "This is a temporary email address that may not be monitored long-term.",
        ICON_ALERT,
    ),
    VerificationStatus.inbox_full: _display(
        "Undeliverable (Full)", AMBER, "INBOX FULL", AMBER,
        "The inbox of this user is full and can no longer receive new emails.",
        ICON_ALERT,
    ),
    VerificationStatus.invalid: _display(
        "Undeliverable", RED, "INVALID ADDRESS", RED,
        "This email address is not available or registered. Emails will bounce back.",
        ICON_X,
    ),
    VerificationStatus.disabled: _display(
        "Undeliverable (Disabled)", RED, "ACCOUNT DISABLED", RED,
        "This account was valid before but has been disabled by the provider.",
        ICON_X,
    ),
    VerificationStatus.spamtrap: _display(
        "Dangerous (Spamtrap)", RED, "SPAM TRAP", RED,
        "This is an email address specifically created to catch spammers.",
        ICON_X,
    ),
    VerificationStatus.unknown: _display(
        "Unknown", GRAY, "UNKNOWN STATUS", GRAY,
        "We couldn't verify the status of this address.",
        ICON_ALERT,
    ),
}


def display_for(status: VerificationStatus) -> Optional[StatusDisplay]:
    """None for `none` (nothing to render)."""
    if status == VerificationStatus.none:
        return None
    return STATUS_DISPLAY.get(status, STATUS_DISPLAY[VerificationStatus.unknown])


def domain_panel(status: VerificationStatus, domain: str) -> DomainPanel:
    return DomainPanel(
        name=domain,
        accept_all=status == VerificationStatus.catch_all,
        disposable=status == VerificationStatus.disposable,
        free=is_free_provider(domain),
    )


def account_panel(status: VerificationStatus) -> AccountPanel:
    return AccountPanel(
        role=status == VerificationStatus.role,
        disabled=status == VerificationStatus.disabled,
        full_mailbox=status == VerificationStatus.inbox_full,
    )


def provider_panel(domain: str) -> Optional[ProviderPanel]:
    provider = identify_provider(domain)
    if provider is None:
        return None
    return ProviderPanel(domain=provider)
