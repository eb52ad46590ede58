"""Input-boundary URL checks and log-safe fingerprints."""

import hashlib
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import validators

HTTP_DEFAULT_PORT = 80
HTTPS_DEFAULT_PORT = 443
ALLOWED_SCHEMES = ("http", "https")


def canonical_url(s: str) -> str:
    """
    Canonical form used only for fingerprints: lowercase scheme/host,
    default port dropped, query sorted, fragment removed.
    """
    s = str(s).strip()
    if not s:
        raise ValueError("empty url")

    parts = urlsplit(s)
    scheme = (parts.scheme or "http").lower()
    if not parts.scheme:
        parts = urlsplit("http://" + s)

    hostname = (parts.hostname or "").lower()
    port = parts.port
    if port in (None, HTTP_DEFAULT_PORT if scheme == "http" else HTTPS_DEFAULT_PORT):
        netloc = hostname
    else:
        netloc = f"{hostname}:{port}"

    query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True))) if parts.query else ""
    return urlunsplit((scheme, netloc, parts.path or "", query, ""))


def url_fingerprint(url: str | None) -> str:
    """Short sha1 of the canonical URL; what we write to logs instead of the URL itself."""
    s = (url or "").strip()
    if not s:
        return "<empty>"
    try:
        s = canonical_url(s)
    except ValueError:
        # порт вида ":abc" и т.п. — хэшируем как есть
        pass
    return hashlib.sha1(s.encode("utf-8")).hexdigest()[:12]


def is_valid_url(s: str | None) -> bool:
    """
    Cheap boundary validation before the URL leaves the client.

    `validators.url` is strict (rejects e.g. some IDN hosts), so a negative
    answer is double-checked with urlsplit: http(s) scheme + netloc is enough.
    """
    s = (s or "").strip()
    if not s or any(ch.isspace() for ch in s):
        return False

    try:
        parts = urlsplit(s)
    except ValueError:
        return False
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        return False

    try:
        if validators.url(s) is True:
            return True
    except Exception:
        pass
    return bool(parts.netloc)
