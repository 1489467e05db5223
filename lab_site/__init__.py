"""Package entrypoint for the lab website.

Exposes an app factory and a ready-to-run Flask instance for CLI/WSGI use.
"""

from .website import create_app

# Create a default app instance so `flask --app lab_site run` works out-of-the-box.
app = create_app()

# Re-export public symbols for importers.
__all__ = ["app", "create_app"]
