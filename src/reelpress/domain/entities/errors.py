class ReelpressError(Exception):
    """Base error for reelpress domain/usecases."""


class InvalidRequest(ReelpressError):
    """Request failed validation before any upstream fetch was attempted."""
