from flask import Blueprint, request, current_app, abort
from .aggregator import lookup_movie, NotFound
from .catalog import get_client, fetch_popular
from .errors import validate_sort_param, validate_limit
from .query_utils import filter_by_title, sort_movies
from .slugs import slugify

api_bp = Blueprint("api", __name__, url_prefix="/api")  # blueprint for API routes


def movie_to_dict(m):
    return m.to_dict() | {"slug": slugify(m.title)}


@api_bp.get("/health")
def health():
    return {"ok": True}


@api_bp.get("/movies")
def list_movies():
    order = validate_sort_param()
    limit = validate_limit()
    q = (request.args.get("q") or "").strip()

    movies = fetch_popular(get_client(), limit)
    items = sort_movies(filter_by_title(movies, q), order)
    return {
        "q": q,
        "sort": order,
        "total": len(items),
        "items": [movie_to_dict(m) for m in items],
    }


@api_bp.get("/movies/<slug>")
def get_movie(slug):
    result = lookup_movie(get_client(), slug)
    if isinstance(result, NotFound):
        abort(404, "Movie not found.")
    body = result.detail.to_dict()
    body["movie"] = movie_to_dict(result.detail.movie)
    return body


@api_bp.get("/genres")
def list_genres():
    genres = current_app.config["GENRES"]
    return {"genres": [{"name": name, "id": gid} for name, gid in genres.items()]}
