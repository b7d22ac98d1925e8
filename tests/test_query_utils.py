from werkzeug.datastructures import MultiDict

from catalog_core.query_utils import (
    filter_by_title, sort_movies, group_by_genre, build_catalog_view, DEFAULT_GENRES,
)
from conftest import movie


def test_filter_empty_query_is_identity(popular):
    assert filter_by_title(popular, "") == popular
    assert filter_by_title(popular, None) == popular
    assert filter_by_title(popular, "   ") == popular

def test_filter_is_case_insensitive_substring(popular):
    titles = [m.title for m in filter_by_title(popular, "DUNE")]
    assert titles == ["Dune: Part Two"]
    assert filter_by_title(popular, "zzz") == []

def test_sort_rating_desc_and_asc():
    ms = [movie(1, "a", 5), movie(2, "b", 8), movie(3, "c", 2)]
    assert [m.vote_average for m in sort_movies(ms, "rating-desc")] == [8, 5, 2]
    assert [m.vote_average for m in sort_movies(ms, "rating-asc")] == [2, 5, 8]

def test_sort_does_not_mutate_input():
    ms = [movie(1, "a", 5), movie(2, "b", 8)]
    sort_movies(ms, "rating-desc")
    assert [m.id for m in ms] == [1, 2]

def test_sort_unknown_key_keeps_order(popular):
    assert sort_movies(popular, "banana") == popular
    assert sort_movies(popular, None) == popular

def test_sort_release_dates_undated_last(popular):
    desc = [m.id for m in sort_movies(popular, "release-desc")]
    asc = [m.id for m in sort_movies(popular, "release-asc")]
    assert desc == [3, 2, 1, 4]
    assert asc == [1, 2, 3, 4]

def test_group_by_genre_multi_membership_and_no_empty_rows():
    ms = [movie(1, "Toy Soldiers", genres=(28, 16)), movie(2, "Quiet Drama", genres=(18,))]
    table = {"Action": 28, "Animation": 16, "Horror": 27, "Drama": 18}
    rows = group_by_genre(ms, table)
    assert list(rows) == ["Action", "Animation", "Drama"]
    assert [m.id for m in rows["Action"]] == [1]
    assert [m.id for m in rows["Animation"]] == [1]
    assert "Horror" not in rows

def test_group_by_genre_default_table(popular):
    rows = group_by_genre(popular)
    assert set(rows) <= set(DEFAULT_GENRES)
    assert [m.id for m in rows["Science Fiction"]] == [1, 3]

def test_build_catalog_view_filters_before_sorting(popular):
    view = build_catalog_view(popular, MultiDict({"q": "IN", "sort": "rating-asc"}), {"Comedy": 35})
    assert view["q"] == "IN"
    assert view["sort"] == "rating-asc"
    assert [m.id for m in view["movies"]] == [2, 3]
    assert [m.id for m in view["genre_rows"]["Comedy"]] == [2, 3]
