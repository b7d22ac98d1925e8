from flask import Blueprint, render_template, request, current_app, abort
import tmdb_api as tapi
from .aggregator import lookup_movie, NotFound
from .catalog import get_client, fetch_popular
from .query_utils import build_catalog_view, SORT_KEYS
from .slugs import slugify

web_bp = Blueprint("web", __name__)


@web_bp.app_template_filter("slug")
def _slug_filter(title):
    return slugify(title)


@web_bp.app_template_filter("image_url")
def _image_url_filter(path, size="w500"):
    return tapi.tmdb_image_url(path, size)


def movie_json_ld(movie) -> dict:
    """schema.org Movie block for the detail page <head>."""
    rating = {"@type": "AggregateRating", "ratingValue": movie.vote_average}
    if movie.vote_count:
        rating["ratingCount"] = movie.vote_count
    return {
        "@context": "https://schema.org",
        "@type": "Movie",
        "name": movie.title,
        "description": movie.overview,
        "datePublished": movie.release_date,
        "aggregateRating": rating,
    }


@web_bp.get("/")
def html_index():
    # no guard here: an upstream failure becomes the generic 500 page
    movies = fetch_popular(get_client(), current_app.config["POPULAR_LIMIT"])
    view = build_catalog_view(movies, request.args, current_app.config["GENRES"])
    return render_template("index.html", sort_keys=SORT_KEYS, **view)


@web_bp.get("/movies/<slug>")
def html_movie(slug):
    result = lookup_movie(get_client(), slug)
    if isinstance(result, NotFound):
        abort(404, "Movie not found.")
    detail = result.detail
    return render_template(
        "movie.html",
        detail=detail,
        movie=detail.movie,
        json_ld=movie_json_ld(detail.movie),
    )
