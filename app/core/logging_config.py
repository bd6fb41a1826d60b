import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a console handler.
    Does nothing if handlers are already attached (e.g. under uvicorn reload or pytest).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)

    # httpx logs full request URLs at INFO, which include API keys
    logging.getLogger("httpx").setLevel(logging.WARNING)
