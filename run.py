"""Start the customer API server.

Usage:
    python run.py

Exits with status 1 when configuration is missing or the database cannot be
reached.
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from crm import create_app
from crm.domain.exceptions import ConfigurationError

logger = logging.getLogger("crm.run")


def main() -> int:
    try:
        app = create_app()
    except ConfigurationError as err:
        logging.basicConfig(level=logging.INFO)
        logger.critical("Config error: %s", err.message)
        return 1
    except SQLAlchemyError as err:
        logging.basicConfig(level=logging.INFO)
        logger.critical("Database connection error: %s", err)
        return 1

    host, port = app.config["HOST"], app.config["PORT"]
    logger.info("Running on %s:%s", host, port)
    app.run(host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
