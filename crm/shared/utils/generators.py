"""Primary keys for ORM rows (CUID2: 24 lowercase alphanumerics, starting with a letter)."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant id; used as the column default of every table."""
    return str(_next_cuid())
