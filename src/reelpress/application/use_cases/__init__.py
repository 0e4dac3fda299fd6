from .extract_links import ExtractLinksUseCase
from .find_links import FindLinksUseCase
from .list_movies import ListMoviesUseCase
from .publish_post import PublishPostUseCase

__all__ = [
    "ExtractLinksUseCase",
    "FindLinksUseCase",
    "ListMoviesUseCase",
    "PublishPostUseCase",
]
