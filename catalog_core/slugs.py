import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """'Spider-Man: Far From Home' -> 'spider-man-far-from-home'"""
    return _NON_ALNUM.sub("-", (title or "").lower()).strip("-")


def deslugify(slug: str) -> str:
    # best-effort search query; punctuation and case are gone for good
    return (slug or "").replace("-", " ")
