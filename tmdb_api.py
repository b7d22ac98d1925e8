import logging

import requests

from models import TMDBError, MovieCredits, movies_from_tmdb
from catalog_core.metrics import TMDB_REQUESTS

TMDB_BASE = "https://api.themoviedb.org/3"  # base url for tmdb api
TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"

logger = logging.getLogger(__name__)


class TMDBClient:
    """Read-only client for the four TMDB endpoints the catalog uses.

    Configuration is passed in explicitly; ``session`` can be any object with a
    ``requests.Session``-style ``get`` so tests never hit the network.
    """

    def __init__(self, token, base_url=TMDB_BASE, timeout=15, session=None):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def headers(self):
        h = {"accept": "application/json"}
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    def _get(self, path, endpoint, **params):  # internal function to make get requests to tmdb
        url = f"{self.base_url}{path}"
        logger.debug("TMDB GET %s params=%s", path, params)
        try:
            r = self.session.get(url, headers=self.headers, params=params, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            TMDB_REQUESTS.labels(endpoint, "error").inc()
            raise TMDBError(f"TMDB {endpoint} request failed: {e}") from e
        except ValueError as e:
            TMDB_REQUESTS.labels(endpoint, "error").inc()
            raise TMDBError(f"TMDB {endpoint} returned invalid JSON") from e
        TMDB_REQUESTS.labels(endpoint, "ok").inc()
        return data

    def popular_movies(self, page=1):
        return movies_from_tmdb(self._get("/movie/popular", "popular", page=page))

    def search_movies(self, query, page=1):  # searching movies by title
        data = self._get("/search/movie", "search", query=query, page=page, include_adult=False)
        return movies_from_tmdb(data)

    def similar_movies(self, movie_id: int, page=1):
        return movies_from_tmdb(self._get(f"/movie/{movie_id}/similar", "similar", page=page))

    def movie_credits(self, movie_id: int) -> MovieCredits:
        return MovieCredits.from_tmdb(self._get(f"/movie/{movie_id}/credits", "credits"))


def tmdb_image_url(path: str | None, size: str = "w500") -> str | None:
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE}/{size}{path}"
