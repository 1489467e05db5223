"""Local dev entrypoint: `python -m lab_site`."""

import logging

from . import app

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
