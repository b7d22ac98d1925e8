from time import perf_counter
from flask import Blueprint, g, request, Response
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

metrics_bp = Blueprint("metrics", __name__)

# labelled by Flask endpoint ("web.html_movie", "api.list_movies", ...), never by slug
PAGE_LATENCY = Histogram(
    "moviecatalog_page_latency_seconds",
    "Time to render a page or API response, upstream calls included",
    ["endpoint"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 15),
)
PAGE_RESPONSES = Counter(
    "moviecatalog_responses_total",
    "Responses by endpoint and status class",
    ["endpoint", "status_class"],
)
TMDB_REQUESTS = Counter(
    "moviecatalog_tmdb_requests_total",
    "Outbound TMDB API calls",
    ["endpoint", "outcome"],
)


def _endpoint_label() -> str:
    return request.endpoint or "unmatched"


@metrics_bp.before_app_request
def _start_timer():
    g._t_start = perf_counter()


@metrics_bp.after_app_request
def _record(resp):
    endpoint = _endpoint_label()
    if endpoint == "metrics.metrics":
        return resp
    start = getattr(g, "_t_start", None)
    if start is not None:
        PAGE_LATENCY.labels(endpoint).observe(perf_counter() - start)
    PAGE_RESPONSES.labels(endpoint, f"{resp.status_code // 100}xx").inc()
    return resp


@metrics_bp.get("/metrics")
def metrics():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
