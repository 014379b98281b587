from dataclasses import dataclass


@dataclass(frozen=True)
class CpuFrequency:
    cpu: int = 0
    min_khz: int = 0
    max_khz: int = 0
