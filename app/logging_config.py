"""
Logging setup shared by the API process and the migration scripts.

Modules log through ``logging.getLogger(__name__)``; this only decides the
format, the level and where records go.
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "INFO"):
    """
    Configure the root logger to write to stdout.

    Safe to call more than once; ``force`` replaces handlers installed by an
    earlier call (or by uvicorn) so records are not duplicated.
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # SQL echo is far too chatty at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
