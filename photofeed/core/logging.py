import logging

HANDLER_NAME = "photofeed"


def setup_logging(level: str = "INFO"):
    """Configure the root logger; repeated calls only update the level."""
    if not any(h.get_name() == HANDLER_NAME for h in logging.root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(
            "[%(levelname)s] %(asctime)s %(name)s - %(message)s",
        ))
        logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
