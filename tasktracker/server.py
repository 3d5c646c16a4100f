"""Development server entry point."""

import logging

from tasktracker import create_app


logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = create_app()
    host = app.config["HOST"]
    port = app.config["PORT"]

    logger.info("Task API listening on http://%s:%s", host, port)
    app.run(host=host, port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
