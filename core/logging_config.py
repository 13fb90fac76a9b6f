import logging
import sys

NOISY_LOGGERS = ["httpx", "httpcore", "urllib3"]


def setup_logging(level: str = "INFO", stream=None) -> None:
    """Configure root logging once for every entry point (UI and MCP)."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        stream=stream or sys.stdout,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    for lib in NOISY_LOGGERS:
        logging.getLogger(lib).setLevel(logging.WARNING)
