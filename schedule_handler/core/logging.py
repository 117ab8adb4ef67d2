import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure le logger racine (un seul handler stdout).
    Appelable plusieurs fois (tests) sans dupliquer les handlers.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # type exact : les handlers de capture de pytest héritent de StreamHandler
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    # uvicorn garde ses propres handlers, on aligne juste le niveau
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level.upper())
