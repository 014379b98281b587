import logging
from pathlib import Path

from sysfacts.data.cpu import CpuFrequency
from sysfacts.util import files, misc, paths
from sysfacts.util.errors import MalformedDataError

logger = logging.getLogger(__name__)

NOT_AFFECTED = "Not affected\n"
MITIGATION_PREFIX = "Mitigation: "


def get_min_max_cpu_freq(n: int, cpufreq_dir: str | Path | None = None) -> CpuFrequency:
    """
    Return the minimum and maximum frequency of CPU n, in KHz.
    See https://docs.kernel.org/admin-guide/pm/cpufreq.html
    """
    if cpufreq_dir is None:
        paths.require_linux()
        cpufreq_dir = paths.resolve(paths.CPUFREQ.format(n=n))

    directory = Path(cpufreq_dir)
    data = {
        "cpu": n,
        "min_khz": files.read_file(directory / "cpuinfo_min_freq").strip(),
        "max_khz": files.read_file(directory / "cpuinfo_max_freq").strip(),
    }

    return misc.build_record(CpuFrequency, data, source=str(directory))


def get_cpu_vulnerabilities(directory: str | Path | None = None) -> dict[str, str]:
    """
    Return the vulnerabilities the CPU is affected by, mapped to how the kernel
    mitigates them. Unaffected entries are left out.
    """
    if directory is None:
        paths.require_linux()
        directory = paths.resolve(paths.VULNERABILITIES)

    vulnerabilities: dict[str, str] = {}
    for entry in files.list_directory(directory):
        contents = files.read_file(entry)
        if contents == NOT_AFFECTED:
            continue

        # Every affected entry is expected to carry the prefix, anything else
        # (e.g. "Vulnerable") is reported rather than passed through
        if not contents.startswith(MITIGATION_PREFIX):
            raise MalformedDataError(
                field=entry.name, value=contents.strip(), source=str(directory)
            )

        vulnerabilities[entry.name] = contents.removeprefix(MITIGATION_PREFIX).strip()

    logger.debug(f"found {len(vulnerabilities)} mitigated vulnerabilities")
    return vulnerabilities
