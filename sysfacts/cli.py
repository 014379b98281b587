import json
import logging
import sys
from dataclasses import asdict
from functools import wraps
from pathlib import Path

import click

from sysfacts import facts
from sysfacts.data.cpuinfo import ProcessorEntry
from sysfacts.util import conversion, log, paths
from sysfacts.util.errors import NotFoundError, SysFactsError, UnsupportedError

context_settings = dict(help_option_names=["-h", "--help"])
logger = logging.getLogger("sysfacts")


def emit(output: dict[str, object]):
    click.echo(json.dumps(output, indent=2))


def error_exit(message: str):
    emit({"error": message, "class": "error"})
    sys.exit(1)


def handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SysFactsError as e:
            logger.error(f"{func.__name__} failed: {e}")
            error_exit(str(e))

    return wrapper


def render_cpu() -> dict[str, object]:
    cpu_info = facts.parse_cpuinfo()
    entries: list[dict[str, object]] = []
    for entry in cpu_info.entries:
        kind = "processor" if isinstance(entry, ProcessorEntry) else "information"
        entries.append({"type": kind, **asdict(entry)})

    output: dict[str, object] = {"cores": cpu_info.cores(), "entries": entries}

    try:
        output["model"] = facts.processor_name()
    except UnsupportedError as e:
        logger.info(f"{e}")
        output["model"] = "Unknown"

    try:
        frequency = facts.get_min_max_cpu_freq(0)
        output["frequency"] = {
            "min": conversion.processor_speed(conversion.khz_to_mhz(frequency.min_khz)),
            "max": conversion.processor_speed(conversion.khz_to_mhz(frequency.max_khz)),
        }
    except NotFoundError as e:
        # Virtual machines usually have no cpufreq directory
        logger.info(f"no frequency data: {e}")

    return output


@click.group(
    help="Print facts about this machine as JSON",
    context_settings=context_settings,
)
@click.option("-d", "--debug", is_flag=True, default=False, help="Enable debug logging")
def cli(debug: bool):
    logfile = paths.get_cache_directory() / "sysfacts.log"
    log.configure(debug=debug, name="sysfacts", logfile=logfile)
    logger.debug("entering function")


@cli.command(help="CPU entries from /proc/cpuinfo, model and frequency range")
@handle_errors
def cpu():
    emit(render_cpu())


@cli.command(help="Memory and swap totals from /proc/meminfo")
@handle_errors
def memory():
    emit(asdict(facts.parse_meminfo()))


@cli.command(name="os", help="Operating system identity from os-release")
@click.option(
    "-f",
    "--file",
    "path",
    required=False,
    type=click.Path(path_type=Path),
    help="Parse this os-release file instead of the system one",
)
@handle_errors
def os_release(path: Path | None):
    if path:
        release = facts.parse_os_release_file(path)
    else:
        release = facts.parse_os_release()

    # get_name() prefers PRETTY_NAME over the raw NAME field
    emit({**asdict(release), "name": release.get_name()})


@cli.command(help="Kernel version, architecture and hostname")
@handle_errors
def kernel():
    emit(
        {
            "version": facts.kernel_version(),
            "arch": facts.arch(),
            "hostname": facts.hostname(),
        }
    )


@cli.command(help="CPU vulnerabilities and their mitigations")
@handle_errors
def vulnerabilities():
    emit(facts.get_cpu_vulnerabilities())


@cli.command(help="Desktop environment and session type")
def session():
    emit(
        {
            "desktop_environment": facts.desktop_environment(),
            "session_type": facts.session_type(),
        }
    )


def main():
    cli()


if __name__ == "__main__":
    main()
