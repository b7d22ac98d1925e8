from typing import Mapping, Sequence
from models import MovieSummary

# TMDB genre ids, in the order the genre rows are rendered
DEFAULT_GENRES: dict[str, int] = {
    "Action": 28,
    "Adventure": 12,
    "Animation": 16,
    "Comedy": 35,
    "Crime": 80,
    "Drama": 18,
    "Family": 10751,
    "Fantasy": 14,
    "Horror": 27,
    "Romance": 10749,
    "Science Fiction": 878,
    "Thriller": 53,
}

SORT_KEYS = ("rating-desc", "rating-asc", "release-desc", "release-asc")


def filter_by_title(movies: Sequence[MovieSummary], query: str | None) -> list[MovieSummary]:
    q = (query or "").strip().lower()
    if not q:
        return list(movies)
    return [m for m in movies if q in m.title.lower()]


def sort_movies(movies: Sequence[MovieSummary], key: str | None) -> list[MovieSummary]:
    """Return a sorted copy; unknown keys keep the incoming order."""
    if key == "rating-desc":
        return sorted(movies, key=lambda m: m.vote_average, reverse=True)
    if key == "rating-asc":
        return sorted(movies, key=lambda m: m.vote_average)
    if key in {"release-desc", "release-asc"}:
        dated = [m for m in movies if m.release_date]
        undated = [m for m in movies if not m.release_date]
        dated.sort(key=lambda m: m.release_date, reverse=(key == "release-desc"))
        return dated + undated
    return list(movies)


def group_by_genre(
    movies: Sequence[MovieSummary], genres: Mapping[str, int] = DEFAULT_GENRES
) -> dict[str, list[MovieSummary]]:
    rows = {}
    for name, genre_id in genres.items():
        matching = [m for m in movies if genre_id in m.genre_ids]
        if matching:
            rows[name] = matching
    return rows


def build_catalog_view(movies, req_args, genres: Mapping[str, int] = DEFAULT_GENRES):
    q = (req_args.get("q") or "").strip()
    order = req_args.get("sort") or None

    items = sort_movies(filter_by_title(movies, q), order)
    return {
        "movies": items,
        "genre_rows": group_by_genre(items, genres),
        "q": q,
        "sort": order,
    }
