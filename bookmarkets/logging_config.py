import logging


def setup_logging(level="INFO", logger=None):
    """
    Attach a console handler to ``logger`` (the root logger by default),
    unless it already has handlers. ``level`` is a level name such as
    ``"DEBUG"``, matched case insensitively; unknown names fall back to ``INFO``.
    """
    if logger is None:
        logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
