"""
Fetch the lab data document.

One GET per call, over ``urllib`` with a certifi-backed TLS context when
certifi is installed. Every way the load can fail is collapsed into
:class:`DocumentLoadError` so callers handle a single exception type.
"""

import json
import logging
import ssl
from urllib import error, request

try:
    import certifi
except ImportError:  # pragma: no cover - optional dependency
    certifi = None

from .site_config import resolve_source


USER_AGENT = "Mozilla/5.0 (compatible; lab-site/1.0)"
LOGGER = logging.getLogger(__name__)
FETCH_ERRORS = (
    error.URLError,
    OSError,
    UnicodeDecodeError,
    ValueError,
)


class DocumentLoadError(RuntimeError):
    """Raised when the data document cannot be fetched or parsed."""

    def __init__(self, source, reason):
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason


def _build_ssl_context():
    """
    Build a TLS context for HTTPS fetches.

    Prefer certifi's CA bundle when available.
    """

    cafile = certifi.where() if certifi is not None else None
    if cafile:
        return ssl.create_default_context(cafile=cafile)
    return ssl.create_default_context()


def _urlopen(req):
    """
    Open a request, passing the TLS context only for HTTPS URLs.
    """

    if req.full_url.startswith("https:"):
        return request.urlopen(req, context=_build_ssl_context())
    return request.urlopen(req)


def _response_status(response):
    """Return the HTTP status of a response; ``file://`` responses count as 200."""
    status = getattr(response, "status", None)
    if status is None:
        return 200
    return status


def fetch_document(source, base_url=None) -> dict:
    """
    Fetch and parse the data document.

    :param source: URL (``http``, ``https`` or ``file``), absolute path,
        or relative reference such as ``./data.json``.
    :param base_url: Base URL used to resolve a relative ``source``.
    :raises DocumentLoadError: On transport failure, non-success HTTP
        status, undecodable body, malformed JSON, or a non-object document.
    :returns: The parsed document.
    """

    try:
        url = resolve_source(source, base_url)
        req = request.Request(url, headers={"User-Agent": USER_AGENT})
        with _urlopen(req) as response:
            status = _response_status(response)
            if not 200 <= status < 300:
                raise DocumentLoadError(url, f"HTTP error! status: {status}")
            body = response.read().decode("utf-8")
        document = json.loads(body)
    except error.HTTPError as err:
        raise DocumentLoadError(source, f"HTTP error! status: {err.code}") from err
    except FETCH_ERRORS as err:
        raise DocumentLoadError(source, err) from err

    if not isinstance(document, dict):
        raise DocumentLoadError(source, "document is not a JSON object")

    LOGGER.debug("Loaded data document from %s", url)
    return document
