"""Typed domain models shared across runtime layers."""

from dataclasses import dataclass
from enum import Enum


class PayloadUnit(str, Enum):
    """Size unit accepted by the synthetic payload endpoint."""

    BYTE = "byte"
    KB = "kb"
    MB = "mb"
    GB = "gb"
    TB = "tb"

    @property
    def multiplier(self) -> int:
        """Return the byte multiplier for this unit (1024 to the unit rank)."""

        return 1024 ** _UNIT_RANKS[self]


_UNIT_RANKS = {
    PayloadUnit.BYTE: 0,
    PayloadUnit.KB: 1,
    PayloadUnit.MB: 2,
    PayloadUnit.GB: 3,
    PayloadUnit.TB: 4,
}


@dataclass(frozen=True)
class PayloadSpec:
    """Synthetic payload request derived from query parameters.

    Attributes:
        size: Non-negative count of units.
        unit: Unit multiplying the size.
        as_attachment: Whether the payload is served as a downloadable file.
    """

    size: int
    unit: PayloadUnit = PayloadUnit.BYTE
    as_attachment: bool = False

    @property
    def byte_length(self) -> int:
        """Return the exact number of bytes to generate."""

        return self.size * self.unit.multiplier
