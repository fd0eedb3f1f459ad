import logging


def set_logger(log_level: int = logging.INFO, name: str = "area_mcp") -> logging.Logger:
    """
    Setup logging configuration for area-mcp.

    The handler writes to stderr: stdout carries the MCP stdio stream.

    Args:
        log_level: The logging level (e.g., logging.INFO, logging.DEBUG).
        name: The name of the logger.

    Returns:
        A configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
