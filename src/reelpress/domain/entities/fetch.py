"""Value objects describing the outcome of one outbound page fetch."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchFailure:
    """Why a fetch did not produce a body.

    ``status_code`` is ``None`` for transport errors (DNS, connect, timeout).
    """

    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class FetchOutcome:
    """Either the raw HTML body or a :class:`FetchFailure`, never both."""

    url: str
    html: str | None = None
    failure: FetchFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.html is not None

    @classmethod
    def success(cls, url: str, html: str) -> FetchOutcome:
        return cls(url=url, html=html)

    @classmethod
    def failed(
        cls, url: str, message: str, status_code: int | None = None
    ) -> FetchOutcome:
        return cls(url=url, failure=FetchFailure(message, status_code))
