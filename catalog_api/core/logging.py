import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole application."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL statements are only wanted when SQL_ECHO is on, and that goes through
    # the engine's own echo flag.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
