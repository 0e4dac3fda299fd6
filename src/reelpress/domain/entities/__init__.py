from .errors import InvalidRequest, ReelpressError
from .fetch import FetchFailure, FetchOutcome
from .movies import (
    DownloadLink,
    LinkFinderResult,
    MovieDetails,
    MovieListResult,
    PostSummary,
)
from .settings import DomainSettings
from .wordpress import WordPressPostResult, WordPressSite

__all__ = [
    "DomainSettings",
    "DownloadLink",
    "FetchFailure",
    "FetchOutcome",
    "InvalidRequest",
    "LinkFinderResult",
    "MovieDetails",
    "MovieListResult",
    "PostSummary",
    "ReelpressError",
    "WordPressPostResult",
    "WordPressSite",
]
