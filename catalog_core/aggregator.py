"""Slug -> movie detail lookup.

A lookup either resolves to a full :class:`MovieDetail` (search, then similar
titles, then credits) or ends in :class:`NotFound`. There are no partial
results: if any upstream call fails the whole lookup is NotFound.
"""

import logging
from dataclasses import dataclass

from models import MovieDetail, TMDBError
from .slugs import deslugify

MAX_SIMILAR = 10
MAX_CAST = 8

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ready:
    detail: MovieDetail


@dataclass(frozen=True)
class NotFound:
    reason: str


def lookup_movie(client, slug: str) -> Ready | NotFound:
    query = deslugify(slug)
    try:
        results = client.search_movies(query)
        if not results:
            logger.info("no TMDB match for slug %r", slug)
            return NotFound(f"no match for {query!r}")

        # first hit wins, even when several titles share the slug
        movie = results[0]
        similar = client.similar_movies(movie.id)
        credits = client.movie_credits(movie.id)
    except TMDBError as e:
        logger.warning("lookup for slug %r failed: %s", slug, e)
        return NotFound(str(e))

    return Ready(MovieDetail(
        movie=movie,
        similar=similar[:MAX_SIMILAR],
        cast=credits.cast[:MAX_CAST],
        crew=list(credits.crew),
    ))
