"""
Primitive field predicates.

Characters are counted as Unicode code points (``len`` on ``str``), so
multi-byte text is measured by what a reader sees rather than its encoding.
"""

# Placeholder for a real character-class check; kept for output parity.
ALPHA_SHAPE_MAX = 3


def exceeds_max_length(value: str, bound: int) -> bool:
    """Return True iff ``value`` has strictly more than ``bound`` characters."""
    return len(value) > bound


def fails_alpha_shape(value: str) -> bool:
    """Return True iff ``value`` fails the (placeholder) alphanumeric shape check."""
    return len(value) > ALPHA_SHAPE_MAX
