"""
URL helpers shared by the metadata extractors and the CLI.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlparse, urlsplit, urlunsplit

ALLOWED_SCHEMES = ("http", "https")


def resolve_url(base_url: str, reference: str) -> str:
    """Resolve ``reference`` against ``base_url``.

    http and https results are normalized so equal URLs compare equal: the
    scheme and host are lower-cased and an empty path becomes ``/``. Returns
    the reference unchanged when it cannot be resolved.
    """
    reference = reference.strip()
    try:
        return _normalize(urljoin(base_url, reference))
    except ValueError:
        return reference


def _normalize(url: str) -> str:
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES or not parts.netloc:
        return url

    # user info is case-sensitive, the host is not
    userinfo, at, host = parts.netloc.rpartition("@")
    netloc = userinfo + at + host.lower()
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment))


def host_of(url: str) -> Optional[str]:
    """Return the lower-cased host of ``url``, or None when it has none."""
    try:
        return urlparse(url).hostname or None
    except ValueError:
        return None


def is_absolute_http_url(url: str) -> bool:
    """True for absolute http/https URLs with a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme.lower() in ALLOWED_SCHEMES and bool(parsed.netloc)
