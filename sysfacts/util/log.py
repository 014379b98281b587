import logging
import os
from pathlib import Path


class LevelPadFormatter(logging.Formatter):
    LEVEL_WIDTH = len("WARNING")

    def format(self, record):
        level = record.levelname
        pad = " " * (self.LEVEL_WIDTH - len(level))
        record.padded = f"[{level}]{pad}"
        return super().format(record)


def configure(debug: bool, name: str, logfile: Path) -> logging.Logger:
    """
    Attach a file handler to the named logger and return it. The library
    modules log under "sysfacts.*", so passing name="sysfacts" captures them.
    """
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Logs go only to the file, stdout is reserved for JSON
    logger.propagate = False

    # Do not add handlers twice
    if any(
        isinstance(h, logging.FileHandler)
        and h.baseFilename == os.path.abspath(logfile)
        for h in logger.handlers
    ):
        return logger

    handler = logging.FileHandler(logfile, mode="a", encoding="utf-8")
    handler.setLevel(level)
    formatter = LevelPadFormatter(
        "%(asctime)s %(padded)s %(name)s.%(funcName)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
