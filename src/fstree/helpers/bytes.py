"""Byte size formatting for the size annotations."""

from enum import Enum

from humanfriendly import format_size as human_format_size


class SizeFormat(Enum):
    """Unit used to print file sizes.

    Units are 1024-based. HUMAN picks the unit per value.

    Example:
        >>> SizeFormat.MEGABYTES.unit
        'MB'
        >>> SizeFormat.MEGABYTES.full_name
        'MegaBytes'
    """

    BYTES = ("B", "Bytes", 0)
    KILOBYTES = ("KB", "KiloBytes", 1)
    MEGABYTES = ("MB", "MegaBytes", 2)
    GIGABYTES = ("GB", "GigaBytes", 3)
    TERABYTES = ("TB", "TeraBytes", 4)
    PETABYTES = ("PB", "PetaBytes", 5)
    EXABYTES = ("EB", "ExaBytes", 6)
    HUMAN = ("", "Human", -1)

    def __init__(self, unit: str, full_name: str, exponent: int) -> None:
        self.unit = unit
        self.full_name = full_name
        self.exponent = exponent

    @property
    def granularity(self) -> int:
        """Number of bytes in one unit (1 for BYTES and HUMAN)."""
        return 1024 ** max(self.exponent, 0)


_ALIASES = {
    SizeFormat.BYTES: ("b", "bytes"),
    SizeFormat.KILOBYTES: ("k", "kb", "kilo", "kilobytes"),
    SizeFormat.MEGABYTES: ("m", "mb", "mega", "megabytes"),
    SizeFormat.GIGABYTES: ("g", "gb", "giga", "gigabytes"),
    SizeFormat.TERABYTES: ("t", "tb", "tera", "terabytes"),
    SizeFormat.PETABYTES: ("p", "pb", "peta", "petabytes"),
    SizeFormat.EXABYTES: ("e", "eb", "exa", "exabytes"),
    SizeFormat.HUMAN: ("h", "human"),
}


def format_size(num_bytes: int, size_format: SizeFormat = SizeFormat.BYTES) -> str:
    """Format a byte count in the given unit.

    Args:
        num_bytes: Number of bytes.
        size_format: Unit to express the value in.

    Returns:
        The formatted size. Whole bytes have no decimals, other units two.

    Example:
        >>> format_size(512)
        '512B'
        >>> format_size(1048576, SizeFormat.MEGABYTES)
        '1.00MB'
        >>> format_size(1536, SizeFormat.KILOBYTES)
        '1.50KB'
        >>> format_size(1048576, SizeFormat.HUMAN)
        '1 MiB'
    """
    if size_format is SizeFormat.HUMAN:
        return human_format_size(num_bytes, binary=True)
    if size_format is SizeFormat.BYTES:
        return f"{num_bytes}{size_format.unit}"
    return f"{num_bytes / size_format.granularity:.2f}{size_format.unit}"


def parse_size_format(value: str) -> SizeFormat:
    """Parse a size format name such as ``mb`` or ``KiloBytes``.

    Raises:
        ValueError: If the name is not recognized.

    Example:
        >>> parse_size_format("MB")
        <SizeFormat.MEGABYTES: ('MB', 'MegaBytes', 2)>
    """
    lowered = value.strip().lower()
    for size_format, aliases in _ALIASES.items():
        if lowered in aliases:
            return size_format
    raise ValueError(f"Unknown size format: {value}")
