"""URL canonicalization helpers for duplicate matching and domain grouping."""

from __future__ import annotations

from urllib.parse import (
    SplitResult,
    parse_qsl,
    urlencode,
    urlsplit,
    urlunsplit,
)

_TRACKING_QUERY_KEYS = frozenset(
    {
        "fbclid",
        "gclid",
        "msclkid",
        "ref",
        "source",
        "_ga",
        "_gid",
        "_gl",
        "mc_cid",
        "mc_eid",
    },
)
_DEFAULT_PORT_BY_SCHEME = {"http": 80, "https": 443}
_DEFAULT_SCHEME = "https"
_WWW_PREFIX = "www."

_SHORTENER_HOSTS = frozenset(
    {
        "bit.ly",
        "tinyurl.com",
        "t.co",
        "goo.gl",
        "ow.ly",
        "short.link",
        "tiny.cc",
        "is.gd",
        "buff.ly",
        "ift.tt",
        "youtu.be",
        "amzn.to",
        "fb.me",
        "li.st",
        "tr.im",
        "cutt.ly",
        "rebrand.ly",
        "bl.ink",
        "switchy.io",
        "short.io",
        "tiny.one",
        "link.do",
        "clck.ru",
    },
)
_COMMON_TLD_SUFFIXES = (
    ".com",
    ".org",
    ".net",
    ".edu",
    ".gov",
    ".mil",
    ".int",
    ".co.uk",
    ".de",
    ".fr",
    ".jp",
    ".cn",
)
_SHORT_LABEL_MAX_LENGTH = 3


def canonicalize_url(value: str) -> str:
    """Return the comparable form of a URL, degrading to lowercased text.

    Malformed input never raises: anything that cannot be parsed into a
    host-bearing URL falls back to ``value.strip().lower()``.
    """
    fallback = value.strip().lower()
    split = _split_with_default_scheme(value)
    if split is None:
        return fallback

    netloc = _canonicalize_netloc(split=split)
    if netloc is None:
        return fallback

    scheme = split.scheme.lower()
    if scheme == "http":
        scheme = _DEFAULT_SCHEME

    return urlunsplit(
        (
            scheme,
            netloc,
            _canonicalize_path(split.path),
            _canonicalize_query(split.query),
            "",
        ),
    )


def url_variations(value: str) -> list[str]:
    """Return common alternate spellings of one URL for exact-variant lookup.

    Variants cover ``www.`` presence, ``http`` versus ``https`` and trailing
    slash presence. The canonical form is always first.
    """
    canonical = canonicalize_url(value)
    original = _split_with_default_scheme(value)
    if original is None or _canonicalize_netloc(split=original) is None:
        return [canonical]

    split = urlsplit(canonical)

    bare_netloc = split.netloc
    www_netloc = f"{_WWW_PREFIX}{bare_netloc}"
    path = split.path
    slash_path = path if path.endswith("/") else f"{path}/"
    query = split.query

    candidates = (
        canonical,
        urlunsplit(("https", www_netloc, path, query, "")),
        urlunsplit(("http", bare_netloc, path, query, "")),
        urlunsplit(("http", www_netloc, path, query, "")),
        urlunsplit(("https", bare_netloc, slash_path, query, "")),
        urlunsplit(("https", www_netloc, slash_path, query, "")),
    )
    variations: list[str] = []
    for candidate in candidates:
        if candidate not in variations:
            variations.append(candidate)
    return variations


def extract_domain(value: str) -> str:
    """Return lowercase host without ``www.`` used to group bookmarks."""
    split = _split_with_default_scheme(value)
    hostname: str | None = None
    if split is not None:
        hostname = split.hostname
    if hostname:
        return _strip_www(hostname.lower())
    return _fallback_domain(value)


def is_short_url(value: str) -> bool:
    """Return whether the URL host looks like a link shortener."""
    host = extract_domain(value)
    if host in _SHORTENER_HOSTS:
        return True

    labels = host.split(".")
    if len(labels) < 2:
        return False
    second_level = labels[-2]
    return len(second_level) <= _SHORT_LABEL_MAX_LENGTH and not host.endswith(
        _COMMON_TLD_SUFFIXES,
    )


def is_tracking_query_param(key: str) -> bool:
    """Return whether a query parameter key is a known tracking parameter."""
    lowered_key = key.lower()
    return lowered_key.startswith("utm_") or lowered_key in _TRACKING_QUERY_KEYS


def _split_with_default_scheme(value: str) -> SplitResult | None:
    stripped = value.strip()
    if not stripped:
        return None
    try:
        split = urlsplit(stripped)
        if not split.scheme or (not split.netloc and "://" not in stripped):
            split = urlsplit(f"{_DEFAULT_SCHEME}://{stripped.lstrip('/')}")
    except ValueError:
        return None
    return split


def _canonicalize_netloc(*, split: SplitResult) -> str | None:
    try:
        hostname = split.hostname
        port = split.port
    except ValueError:
        return None
    if not hostname or any(char.isspace() for char in hostname):
        return None

    normalized_hostname = _strip_www(hostname.lower())
    if ":" in normalized_hostname:
        normalized_hostname = f"[{normalized_hostname}]"
    if port == _DEFAULT_PORT_BY_SCHEME.get(split.scheme.lower()):
        port = None

    userinfo = ""
    if split.username is not None:
        userinfo = split.username
        if split.password is not None:
            userinfo = f"{userinfo}:{split.password}"
        userinfo = f"{userinfo}@"

    netloc = f"{userinfo}{normalized_hostname}"
    if port is not None:
        return f"{netloc}:{port}"
    return netloc


def _canonicalize_path(path: str) -> str:
    if not path:
        return "/"
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


def _canonicalize_query(query: str) -> str:
    kept_params = [
        (key, value)
        for key, value in parse_qsl(query, keep_blank_values=True)
        if not is_tracking_query_param(key)
    ]
    kept_params.sort(key=lambda param: param[0])
    return urlencode(kept_params)


def _strip_www(hostname: str) -> str:
    if hostname.startswith(_WWW_PREFIX):
        return hostname[len(_WWW_PREFIX) :]
    return hostname


def _fallback_domain(value: str) -> str:
    lowered = value.strip().lower()
    for prefix in ("https://", "http://"):
        if lowered.startswith(prefix):
            lowered = lowered[len(prefix) :]
            break
    lowered = lowered.split("/", 1)[0]
    return _strip_www(lowered)
