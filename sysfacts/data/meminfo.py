from dataclasses import dataclass


@dataclass(frozen=True)
class Meminfo:
    # Raw "value unit" text, e.g. "16318412 kB"
    mem_total: str = ""
    swap_total: str = ""
