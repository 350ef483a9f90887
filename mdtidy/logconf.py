# mdtidy/logconf.py
import logging, sys, pathlib

FMT = "%(asctime)s | %(levelname)-5s | %(module)s | %(message)s"


def init(level: str = "WARNING", log_file: pathlib.Path | None = None):
    """Configure root logger once per run.  stdout is reserved for output."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=FMT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str):
    return logging.getLogger(name)
