from pathlib import Path

from sysfacts.data.meminfo import Meminfo
from sysfacts.util import files, misc, paths


def parse_meminfo_text(text: str) -> Meminfo:
    mapping: dict[str, str] = {
        "MemTotal": "mem_total",
        "SwapTotal": "swap_total",
    }

    data: dict[str, str] = {}
    for line in text.splitlines():
        pair = misc.split_pair(line, ":")
        if pair and pair[0] in mapping:
            data[mapping[pair[0]]] = pair[1]

    return misc.build_record(Meminfo, data, source="meminfo")


def parse_meminfo(path: str | Path | None = None) -> Meminfo:
    """
    Parse the MemTotal and SwapTotal lines of /proc/meminfo.
    """
    if path is None:
        paths.require_linux()
        path = paths.resolve(paths.MEMINFO)

    return parse_meminfo_text(files.read_file(path))
