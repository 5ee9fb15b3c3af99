import logging


def configure_logging(level="INFO"):
    """Set the root level, adding a handler only outside the Lambda runtime."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(level)
