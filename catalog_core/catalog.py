import logging

from flask import current_app

from models import MovieSummary

logger = logging.getLogger(__name__)


def get_client():
    """The TMDB client built by create_app (or injected by tests)."""
    return current_app.extensions["tmdb"]


def fetch_popular(client, limit: int) -> list[MovieSummary]:
    """First ``limit`` popular movies, upstream order. Errors propagate."""
    movies = client.popular_movies()
    logger.debug("popular: %d results, keeping %d", len(movies), limit)
    return movies[:limit]
