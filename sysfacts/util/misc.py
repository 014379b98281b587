from typing import Any, TypeVar

from dacite import Config, DaciteError, from_dict

from sysfacts.util.errors import MalformedDataError

T = TypeVar("T")


def str_hook(v: str | None):
    if v is None:
        return ""
    return str(v).strip()


def unsigned_hook(v: str | int | None):
    if v is None:
        return 0
    number = int(v)
    if number < 0:
        raise ValueError(f"{number} is negative")
    return number


def float_hook(v: str | float | None):
    if v is None:
        return 0.0
    return float(v)


# Shared by every parser that builds records from raw key/value text
record_config = Config(
    cast=[int, float],
    type_hooks={str: str_hook, int: unsigned_hook, float: float_hook},
    strict=False,
)


def split_pair(line: str, delimiter: str) -> tuple[str, str] | None:
    """
    Split a line on the first delimiter only and trim both sides.
    Return None when the delimiter is missing.
    """
    if delimiter not in line:
        return None
    key, value = line.split(delimiter, 1)
    return key.strip(), value.strip()


def build_record(data_class: type[T], data: dict[str, Any], source: str) -> T:
    """
    Build a dataclass from raw parsed values, casting them to the field types.
    Raise MalformedDataError naming the first field that cannot be cast.
    """
    try:
        return from_dict(data_class=data_class, data=data, config=record_config)
    except (ValueError, DaciteError):
        # Rebuild one field at a time to find the culprit
        for key, value in data.items():
            try:
                from_dict(data_class=data_class, data={key: value}, config=record_config)
            except (ValueError, DaciteError) as e:
                raise MalformedDataError(field=key, value=str(value), source=source) from e
        raise
