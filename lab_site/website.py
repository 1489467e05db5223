"""
Flask application for the lab website.

The index route renders the static page shell, fills every dynamic
section from the data document, and returns the finished page. The data
document itself is served at ``/data.json``. Fetching is injectable via
:func:`create_app` for testing.
"""

import os
from pathlib import Path

from bs4 import BeautifulSoup
from flask import Flask, current_app, jsonify, render_template, send_file

from .fetch import fetch_document
from .menu import MenuController
from .renderer import load_and_render
from .site_config import BASE_DIR, get_base_url, get_data_path, get_data_source
from .targets import targets_from_soup


TEMPLATE_DIR = os.path.join(BASE_DIR, "templates")
STATIC_DIR = os.path.join(BASE_DIR, "static")
DATA_NOT_FOUND_MESSAGE = "Lab data is not available."


def render_page(shell_html: str, source, fetch_fn=fetch_document, base_url=None) -> str:
    """
    Fill a page shell with the lab data.

    :param shell_html: Static page markup containing the section containers.
    :param source: Location of the data document.
    :param fetch_fn: Callable used to fetch the document.
    :param base_url: Base URL for a relative ``source``.
    :returns: Finished page markup.
    """

    soup = BeautifulSoup(shell_html, "html.parser")

    menu = MenuController.from_soup(soup)
    if menu is not None:
        menu.close()

    load_and_render(targets_from_soup(soup), source, fetch_fn=fetch_fn, base_url=base_url)
    return str(soup)


def _data_base_url():
    """
    Return the base URL for a relative data source.

    Never derived from the request, so the client cannot choose where the
    server fetches from. Defaults to the data file's directory.
    """

    configured = current_app.config.get("DATA_BASE_URL")
    if configured:
        return configured
    data_path = current_app.config.get("DATA_PATH")
    if data_path:
        return Path(data_path).resolve().parent.as_uri() + "/"
    return get_base_url()


def index():
    """
    Render the lab page.

    :returns: HTML response; data failures are reported in-page.
    """

    fetch_fn = current_app.config.get("FETCH_DOCUMENT", fetch_document)
    source = current_app.config.get("DATA_SOURCE") or get_data_source()
    return render_page(
        render_template("index.html"),
        source,
        fetch_fn=fetch_fn,
        base_url=_data_base_url(),
    )


def data_document():
    """
    Serve the raw data document.

    :returns: JSON file response, or a 404 JSON error when missing.
    """

    data_path = current_app.config.get("DATA_PATH") or get_data_path()
    if not os.path.isfile(data_path):
        current_app.logger.warning("Data document missing at %s", data_path)
        return jsonify({"error": DATA_NOT_FOUND_MESSAGE}), 404
    return send_file(data_path, mimetype="application/json")


def health():
    return jsonify({"status": "healthy"}), 200


def create_app(*, fetch_document_fn=None, data_source=None, data_path=None, data_base_url=None):
    """
    Create and configure the Flask application.

    Dependency injection hooks are exposed for testability.

    :param fetch_document_fn: Optional callable to replace the document fetch.
    :param data_source: Optional URL or relative reference of the document.
    :param data_path: Optional file served at ``/data.json``.
    :param data_base_url: Optional base URL for a relative ``data_source``.
    :returns: Configured Flask app instance.
    """

    app = Flask(__name__, template_folder=TEMPLATE_DIR, static_folder=STATIC_DIR)
    if fetch_document_fn is not None:
        app.config["FETCH_DOCUMENT"] = fetch_document_fn
    if data_source is not None:
        app.config["DATA_SOURCE"] = data_source
    if data_path is not None:
        app.config["DATA_PATH"] = str(data_path)
    if data_base_url is not None:
        app.config["DATA_BASE_URL"] = data_base_url
    app.add_url_rule("/", "index", index)
    app.add_url_rule("/index.html", "index_html", index)
    app.add_url_rule("/data.json", "data_document", data_document)
    app.add_url_rule("/health", "health", health)
    return app
