"""reelpress: movie-listing scraper and WordPress draft publisher."""

__version__ = "0.1.0"
