from dataclasses import dataclass, field, asdict
from typing import Any


class TMDBError(Exception):
    """Upstream call failed (transport, HTTP status or undecodable body)."""


class MalformedPayload(TMDBError):
    """Upstream answered, but not with the shape we expect."""


def _results(data: Any) -> list:
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise MalformedPayload("response has no 'results' list")
    return data["results"]


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _opt_int(d: dict, key: str) -> int | None:
    v = d.get(key)
    if v is not None and not _is_int(v):
        raise MalformedPayload(f"{key} must be an integer")
    return v


def _opt_str(d: dict, key: str) -> str | None:
    v = d.get(key)
    if v is not None and not isinstance(v, str):
        raise MalformedPayload(f"{key} must be a string")
    return v or None


def _int_list(d: dict, key: str) -> tuple[int, ...]:
    v = d.get(key)
    if v is None:
        return ()
    if not isinstance(v, list) or not all(_is_int(x) for x in v):
        raise MalformedPayload(f"{key} must be a list of integers")
    return tuple(v)


@dataclass(frozen=True)
class MovieSummary:  # one entry of a TMDB movie list
    id: int
    title: str
    poster_path: str | None = None
    vote_average: float = 0.0
    vote_count: int | None = None
    release_date: str | None = None    # ISO date, None when TMDB sends ""
    genre_ids: tuple[int, ...] = ()
    backdrop_path: str | None = None
    overview: str = ""
    original_language: str = ""

    @classmethod
    def from_tmdb(cls, m: Any) -> "MovieSummary":
        if not isinstance(m, dict):
            raise MalformedPayload("movie entry must be an object")
        mid = m.get("id")
        title = m.get("title") or m.get("name")
        if not _is_int(mid) or not isinstance(title, str) or not title:
            raise MalformedPayload(f"movie entry missing id/title: {m!r:.80}")
        vote_average = m.get("vote_average")
        if vote_average is None:
            vote_average = 0.0
        elif isinstance(vote_average, bool) or not isinstance(vote_average, (int, float)):
            raise MalformedPayload("vote_average must be a number")
        return cls(
            id=mid,
            title=title,
            poster_path=_opt_str(m, "poster_path"),
            vote_average=float(vote_average),
            vote_count=_opt_int(m, "vote_count"),
            release_date=_opt_str(m, "release_date"),
            genre_ids=_int_list(m, "genre_ids"),
            backdrop_path=_opt_str(m, "backdrop_path"),
            overview=_opt_str(m, "overview") or "",
            original_language=_opt_str(m, "original_language") or "",
        )

    @property
    def year(self) -> str | None:
        return self.release_date[:4] if self.release_date else None

    def to_dict(self) -> dict:
        d = asdict(self)
        d["genre_ids"] = list(self.genre_ids)
        return d


@dataclass(frozen=True)
class Credit:
    id: int
    name: str
    profile_path: str | None = None
    character: str | None = None  # cast only
    job: str | None = None        # crew only

    @classmethod
    def from_tmdb(cls, c: Any) -> "Credit":
        if not isinstance(c, dict) or not _is_int(c.get("id")) or not isinstance(c.get("name"), str) or not c["name"]:
            raise MalformedPayload(f"credit entry missing id/name: {c!r:.80}")
        return cls(
            id=c["id"],
            name=c["name"],
            profile_path=_opt_str(c, "profile_path"),
            character=_opt_str(c, "character"),
            job=_opt_str(c, "job"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class MovieCredits:
    cast: list[Credit] = field(default_factory=list)
    crew: list[Credit] = field(default_factory=list)

    @classmethod
    def from_tmdb(cls, data: Any) -> "MovieCredits":
        if not isinstance(data, dict):
            raise MalformedPayload("credits response must be an object")
        cast, crew = data.get("cast", []), data.get("crew", [])
        if not isinstance(cast, list) or not isinstance(crew, list):
            raise MalformedPayload("credits 'cast' and 'crew' must be lists")
        return cls(
            cast=[Credit.from_tmdb(c) for c in cast],
            crew=[Credit.from_tmdb(c) for c in crew],
        )


@dataclass(frozen=True)
class MovieDetail:
    """Everything the detail page shows, built fresh per request."""

    movie: MovieSummary
    similar: list[MovieSummary]
    cast: list[Credit]
    crew: list[Credit]

    @property
    def directors(self) -> list[Credit]:
        return [c for c in self.crew if c.job == "Director"]

    def to_dict(self) -> dict:
        return {
            "movie": self.movie.to_dict(),
            "similar": [m.to_dict() for m in self.similar],
            "cast": [c.to_dict() for c in self.cast],
            "crew": [c.to_dict() for c in self.crew],
        }


def movies_from_tmdb(data: Any) -> list[MovieSummary]:
    return [MovieSummary.from_tmdb(m) for m in _results(data)]
