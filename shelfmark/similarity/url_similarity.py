"""Structural URL similarity over domain, path and query parameters."""

from __future__ import annotations

from urllib.parse import SplitResult, parse_qsl, urlsplit

from shelfmark.normalize import canonicalize_url

from .text_similarity import levenshtein_similarity

EXACT_URL_SCORE = 1.0
CANONICAL_URL_SCORE = 0.95
DOMAIN_WEIGHT = 0.4
PATH_WEIGHT = 0.4
QUERY_WEIGHT = 0.2

WWW_DOMAIN_SCORE = 0.95
SUBDOMAIN_SCORE = 0.8
ONE_SIDED_QUERY_SCORE = 0.5


def url_similarity(left_url: str, right_url: str) -> float:
    """Return similarity of two URLs in ``[0, 1]``.

    Raw equality scores 1.0 and canonical equality 0.95. Otherwise domain,
    path and query similarity are blended; URLs that cannot be parsed fall
    back to edit-distance similarity of the raw strings.
    """
    if left_url == right_url:
        return EXACT_URL_SCORE

    left_canonical = canonicalize_url(left_url)
    right_canonical = canonicalize_url(right_url)
    if left_canonical == right_canonical:
        return CANONICAL_URL_SCORE

    left_split = _parse(left_canonical)
    right_split = _parse(right_canonical)
    if left_split is None or right_split is None:
        return levenshtein_similarity(left_url, right_url)

    score = (
        domain_similarity(left_split.hostname or "", right_split.hostname or "")
        * DOMAIN_WEIGHT
        + levenshtein_similarity(left_split.path, right_split.path) * PATH_WEIGHT
        + query_similarity(left_split.query, right_split.query) * QUERY_WEIGHT
    )
    return min(1.0, score)


def domain_similarity(left_domain: str, right_domain: str) -> float:
    """Return host similarity with ``www.``-insensitive and subdomain tiers."""
    if left_domain == right_domain:
        return 1.0

    left_bare = left_domain.lower().removeprefix("www.")
    right_bare = right_domain.lower().removeprefix("www.")
    if left_bare == right_bare:
        return WWW_DOMAIN_SCORE
    if left_bare in right_bare or right_bare in left_bare:
        return SUBDOMAIN_SCORE
    return levenshtein_similarity(left_bare, right_bare)


def query_similarity(left_query: str, right_query: str) -> float:
    """Return overlap of query parameters.

    A key present on both sides with the same first value counts twice, a key
    present on both sides with different values counts once; the total is
    divided by the number of keys on both sides.
    """
    if left_query == right_query:
        return 1.0
    if not left_query or not right_query:
        return ONE_SIDED_QUERY_SCORE

    left_params = _first_values(left_query)
    right_params = _first_values(right_query)
    total = len(left_params) + len(right_params)
    if total == 0:
        return 1.0

    common = 0
    for key, left_value in left_params.items():
        if key not in right_params:
            continue
        common += 2 if left_value == right_params[key] else 1
    return common / total


def _parse(value: str) -> SplitResult | None:
    try:
        split = urlsplit(value)
    except ValueError:
        return None
    if not split.netloc:
        return None
    return split


def _first_values(query: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        values.setdefault(key, value)
    return values
