from fastmcp.utilities.logging import configure_logging, get_logger

DEFAULT_LOG_LEVEL = "WARNING"

configure_logging(level=DEFAULT_LOG_LEVEL)
BASE_LOGGER = get_logger("assembly_info_harvester")

if BASE_LOGGER.parent is not None:
    BASE_LOGGER.parent.propagate = False


def set_log_level(level: str) -> None:
    """Reconfigure the handler and level for all harvester loggers."""
    configure_logging(level=level)  # pyright: ignore[reportArgumentType]
