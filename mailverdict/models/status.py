# mailverdict/models/status.py
import enum


class VerificationStatus(str, enum.Enum):
    safe = "safe"
    role = "role"
    catch_all = "catchAll"
    disposable = "disposable"
    invalid = "invalid"
    inbox_full = "inboxFull"
    disabled = "disabled"
    spamtrap = "spamtrap"
    unknown = "unknown"
    none = "none"


# Outcomes the mailbox step picks from when the mailbox does not exist
MAILBOX_FAILURE_STATUSES = (
    VerificationStatus.invalid,
    VerificationStatus.inbox_full,
    VerificationStatus.disabled,
)
