"""Random quote selection."""

from __future__ import annotations

import secrets


def random_index(limit: int) -> int:
    """Return a uniformly random index in ``[0, limit)``.

    Uses :mod:`secrets` so the draw comes from the OS CSPRNG.

    Raises:
        ValueError: If *limit* is not positive.
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    return secrets.randbelow(limit)
