from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProcessorEntry:
    processor_index: int = 0
    clock_mhz: float = 0.0
    core_count: int = 0


@dataclass(frozen=True)
class InformationEntry:
    revision: str = ""
    serial: str = ""
    model: str = ""


CpuEntry = ProcessorEntry | InformationEntry


@dataclass(frozen=True)
class Cpuinfo:
    entries: tuple[CpuEntry, ...] = field(default_factory=tuple)

    def processors(self) -> list[ProcessorEntry]:
        return [entry for entry in self.entries if isinstance(entry, ProcessorEntry)]

    def information(self) -> list[InformationEntry]:
        return [entry for entry in self.entries if isinstance(entry, InformationEntry)]

    def cores(self) -> int:
        """
        Return the core count of the first processor entry, or 0 if there is none.
        The kernel repeats "cpu cores" on every processor, so the first one stands
        for the whole machine.
        """
        for entry in self.entries:
            if isinstance(entry, ProcessorEntry):
                return entry.core_count

        return 0
