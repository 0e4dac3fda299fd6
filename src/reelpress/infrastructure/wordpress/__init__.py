from .content import MAX_SCREENSHOTS, render_post_content, render_post_title
from .publisher import WordPressPublisher

__all__ = [
    "MAX_SCREENSHOTS",
    "WordPressPublisher",
    "render_post_content",
    "render_post_title",
]
