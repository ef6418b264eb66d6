from __future__ import annotations


class BandDataError(ValueError):
    """Raised when band input data or a probe position violates a precondition."""
