"""
Site configuration helpers.

This module centralizes where the lab data document is loaded from so
application code never hard-codes a location.
"""

import os
from pathlib import Path
from urllib import parse


BASE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_PATH = BASE_DIR / "data.json"
DATA_URL_ENV_VAR = "LAB_DATA_URL"
DATA_PATH_ENV_VAR = "LAB_DATA_PATH"
BASE_URL_ENV_VAR = "LAB_DATA_BASE_URL"


def get_data_path() -> Path:
    """
    Return the path of the data document served at ``/data.json``.

    :returns: ``LAB_DATA_PATH`` if set, otherwise the bundled sample file.
    """

    override = os.environ.get(DATA_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    return DEFAULT_DATA_PATH


def get_data_source() -> str:
    """
    Return the URL the renderer fetches the data document from.

    Resolution order:
    1) ``LAB_DATA_URL`` if provided.
    2) A ``file://`` URL for :func:`get_data_path`.

    :returns: URL string accepted by :func:`lab_site.fetch.fetch_document`.
    """

    data_url = os.environ.get(DATA_URL_ENV_VAR)
    if data_url:
        return data_url
    return get_data_path().as_uri()


def get_base_url() -> str:
    """
    Return the base URL that relative data sources resolve against.

    Resolution order:
    1) ``LAB_DATA_BASE_URL`` if provided.
    2) The directory of :func:`get_data_path` as a ``file://`` URL, so
       ``./data.json`` is read from disk rather than over HTTP.

    :returns: Base URL ending in a slash.
    """

    base_url = os.environ.get(BASE_URL_ENV_VAR)
    if base_url:
        return base_url if base_url.endswith("/") else base_url + "/"
    return get_data_path().parent.as_uri() + "/"


def resolve_source(source: str, base_url=None) -> str:
    """
    Resolve a possibly relative source against a base URL.

    :param source: Absolute URL, relative reference, or filesystem path.
    :param base_url: Base URL for relative references, see :func:`get_base_url`.
    :raises ValueError: If ``source`` is relative and no base is given.
    :returns: Absolute URL.
    """

    if parse.urlsplit(source).scheme:
        return source
    if os.path.isabs(source):
        return Path(source).as_uri()
    if not base_url:
        raise ValueError(f"Relative data source {source!r} needs a base URL.")
    return parse.urljoin(base_url, source)
