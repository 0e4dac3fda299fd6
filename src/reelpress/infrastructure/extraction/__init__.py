from .detail import DEFAULT_SCREENSHOT_DOMAINS, extract_movie_details
from .links import find_matching_urls
from .listing import MAX_POSTS, extract_movie_posts

__all__ = [
    "DEFAULT_SCREENSHOT_DOMAINS",
    "MAX_POSTS",
    "extract_movie_details",
    "extract_movie_posts",
    "find_matching_urls",
]
