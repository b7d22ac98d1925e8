import os, sys, pytest
import requests

# allow importing the app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import MovieSummary, Credit, MovieCredits, TMDBError


def movie(mid, title, rating=5.0, date="2020-01-01", genres=(), **kw):
    return MovieSummary(id=mid, title=title, vote_average=rating, release_date=date, genre_ids=tuple(genres), **kw)


class FakeTMDB:
    """Stands in for TMDBClient; records every call and can be told to fail."""

    def __init__(self, popular=None, search=None, similar=None, credits=None, fail=()):
        self.popular = popular or []
        self.search = search or []
        self.similar = similar or []
        self.credits = credits or MovieCredits()
        self.fail = set(fail)
        self.calls = []

    def _hit(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail:
            raise TMDBError(f"{name} blew up")

    def popular_movies(self, page=1):
        self._hit("popular")
        return list(self.popular)

    def search_movies(self, query, page=1):
        self._hit("search", query)
        return list(self.search)

    def similar_movies(self, movie_id, page=1):
        self._hit("similar", movie_id)
        return list(self.similar)

    def movie_credits(self, movie_id):
        self._hit("credits", movie_id)
        return self.credits

    def called(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture()
def popular():
    return [
        movie(1, "Dune: Part Two", 8.3, "2024-02-27", (878, 12), vote_count=5000, poster_path="/dune.jpg"),
        movie(2, "Inside Out 2", 7.6, "2024-06-11", (16, 10751, 35)),
        movie(3, "Deadpool & Wolverine", 7.7, "2024-07-24", (28, 35, 878)),
        movie(4, "Untitled Project", 0.0, None, ()),
    ]


@pytest.fixture()
def blade_runner_credits():
    cast = [Credit(id=100 + i, name=f"Actor {i}", character=f"Role {i}") for i in range(12)]
    crew = [
        Credit(id=1, name="Ridley Scott", job="Director"),
        Credit(id=2, name="Hampton Fancher", job="Screenplay"),
    ]
    return MovieCredits(cast=cast, crew=crew)


@pytest.fixture()
def make_client():
    # isolated app with a fake upstream injected
    from app import create_app

    def _make(fake, **config):
        app = create_app({"TESTING": True, "TMDB_BEARER_TOKEN": "test-token", **config}, tmdb=fake)
        return app.test_client()
    return _make


class FakeResponse:
    def __init__(self, status=200, body=None, bad_json=False):
        self.status_code = status
        self._body = body
        self._bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value")
        return self._body


class FakeSession:
    """requests.Session stand-in that replays canned responses in order."""

    def __init__(self, *responses, exc=None):
        self.responses = list(responses)
        self.exc = exc
        self.requests = []

    def get(self, url, headers=None, params=None, timeout=None):
        self.requests.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        if self.exc:
            raise self.exc
        return self.responses.pop(0)


def tmdb_over(*bodies):
    import tmdb_api as tapi
    session = FakeSession(*[FakeResponse(body=b) for b in bodies])
    return tapi.TMDBClient("tok", base_url="https://tmdb.test/3", session=session)
