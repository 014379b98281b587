import logging
from pathlib import Path

from sysfacts.data.cpuinfo import CpuEntry, Cpuinfo, InformationEntry, ProcessorEntry
from sysfacts.util import files, misc, paths

logger = logging.getLogger(__name__)

# Lowercased cpuinfo keys to record fields
PROCESSOR_MAPPING: dict[str, str] = {
    "processor": "processor_index",
    "cpu mhz": "clock_mhz",
    "cpu cores": "core_count",
}

INFORMATION_MAPPING: dict[str, str] = {
    "revision": "revision",
    "serial": "serial",
    "model": "model",
}


def _split_sections(text: str) -> list[str]:
    """
    Split cpuinfo text into its blank-line-delimited sections, dropping empty ones.
    """
    return [section for section in text.split("\n\n") if section.strip("\n")]


def _section_pairs(section: str) -> list[tuple[str, str]]:
    """
    Return every "key : value" line of a section with the key lowercased.
    Lines without a colon are skipped.
    """
    pairs: list[tuple[str, str]] = []
    for line in section.splitlines():
        pair = misc.split_pair(line, ":")
        if pair:
            key, value = pair
            pairs.append((key.lower(), value))

    return pairs


def is_processor_section(section: str) -> bool:
    """
    Return True when the first key of a section is "processor".

    x86 emits one such section per logical CPU. ARM and friends emit those plus
    a trailing board section ("Hardware", "Revision", "Serial", "Model"), which
    is treated as an information section.
    """
    first_line = section.strip("\n").split("\n", 1)[0]
    key = first_line.split(":", 1)[0]
    return key.strip().lower() == "processor"


def _parse_section(
    section: str,
    entry_class: type[ProcessorEntry] | type[InformationEntry],
    mapping: dict[str, str],
    index: int,
) -> CpuEntry:
    data: dict[str, str] = {}
    for key, value in _section_pairs(section):
        if key in mapping:
            data[mapping[key]] = value

    return misc.build_record(entry_class, data, source=f"cpuinfo section {index}")


def parse_cpuinfo_text(text: str) -> Cpuinfo:
    entries: list[CpuEntry] = []
    for index, section in enumerate(_split_sections(text)):
        if is_processor_section(section):
            entries.append(
                _parse_section(section, ProcessorEntry, PROCESSOR_MAPPING, index)
            )
        else:
            entries.append(
                _parse_section(section, InformationEntry, INFORMATION_MAPPING, index)
            )

    logger.debug(f"parsed {len(entries)} cpuinfo entries")
    return Cpuinfo(entries=tuple(entries))


def parse_cpuinfo(path: str | Path | None = None) -> Cpuinfo:
    """
    Parse /proc/cpuinfo into a Cpuinfo holding one entry per section, in file order.
    """
    if path is None:
        paths.require_linux()
        path = paths.resolve(paths.CPUINFO)

    return parse_cpuinfo_text(files.read_file(path))
