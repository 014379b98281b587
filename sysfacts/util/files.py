import logging
import os
from pathlib import Path

from sysfacts.util.errors import MalformedDataError, NotFoundError, ReadError

logger = logging.getLogger(__name__)


def read_file(path: str | Path) -> str:
    """
    Read a file (usually a kernel pseudo-file) and return its full contents.
    Raise NotFoundError if it does not exist, ReadError if it cannot be read
    and MalformedDataError if it is not UTF-8 text.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            contents = fh.read()
    except FileNotFoundError as e:
        raise NotFoundError(path) from e
    except UnicodeDecodeError as e:
        raise MalformedDataError(
            field=str(path),
            value=repr(e.object[e.start : e.end]),
            source=f"UTF-8 text at byte {e.start}",
        ) from e
    except OSError as e:
        raise ReadError(path, e) from e

    logger.debug(f"read {len(contents)} characters from {path}")
    return contents


def read_env(name: str) -> str:
    """
    Return the value of an environment variable or raise NotFoundError if it is unset.
    """
    value = os.environ.get(name)
    if value is None:
        raise NotFoundError(name, f"environment variable {name} is not set")

    return value


def list_directory(path: str | Path) -> list[Path]:
    """
    Return every entry of a directory, sorted by name.
    """
    directory = Path(path)
    if not directory.is_dir():
        raise NotFoundError(directory)

    try:
        return sorted(directory.iterdir())
    except OSError as e:
        raise ReadError(directory, e) from e
