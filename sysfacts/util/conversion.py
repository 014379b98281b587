def pad_float(number: float = 0.0, round_int: bool = False) -> str:
    """
    Pad a float to two decimal places.
    """
    if isinstance(number, int) and round_int:
        return str(int(number))
    else:
        return f"{number:.2f}"


def khz_to_mhz(number: float) -> float:
    return number / 1000


def mhz_to_hz(number: float) -> float:
    return number * 1000000


def processor_speed(number: float) -> str | None:
    """
    Intelligently determine processor speed
    """
    # cpuinfo reports the number in MHz so we convert to Hz
    number = mhz_to_hz(number=number)
    suffix = "Hz"

    for unit in ["", "K", "M", "G", "T"]:
        if abs(number) < 1000.0:
            return f"{pad_float(number=number, round_int=False)} {unit}{suffix}"
        number = number / 1000

