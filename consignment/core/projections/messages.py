"""
Message catalog: English fragments for each violation reason.

Projectors assemble full sentences from these fragments; field labels are
added by the flat projector only.
"""

NON_ALPHA = "should be alphanumeric"
INVALID_PHONE = "invalid phone"
INVALID_EMAIL = "invalid email"


def non_alpha() -> str:
    return NON_ALPHA


def too_long(bound: int) -> str:
    """Fragment for any length violation (identifier or business name)."""
    return f"too long (should be less than {bound} characters)"


def invalid_phone() -> str:
    return INVALID_PHONE


def invalid_email() -> str:
    return INVALID_EMAIL
