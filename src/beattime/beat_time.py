"""Value type for a day-relative Internet Time reading."""

from __future__ import annotations

from dataclasses import dataclass

from beattime._utils import validate_precision, validate_scaled


@dataclass(frozen=True, order=True)
class BeatTime:
    """Internet Time for one instant, scaled by ``10 ** precision``.

    ``scaled`` is always in ``[0, 1000 * 10 ** precision)``. Instances compare
    by ``(precision, scaled)``, so only readings of equal precision order
    meaningfully against each other.
    """

    precision: int
    scaled: int

    def __post_init__(self) -> None:
        validate_scaled(self.scaled, validate_precision(self.precision))

    @property
    def value(self) -> int | float:
        """Beats with the decimal point restored.

        An ``int`` at precision 0, a ``float`` otherwise.
        """
        if self.precision == 0:
            return self.scaled
        return self.scaled / 10**self.precision

    @property
    def beats(self) -> int:
        """Whole beats, ``0`` to ``999``."""
        return self.scaled // 10**self.precision

    @property
    def fraction(self) -> int:
        """Digits after the decimal point as an integer (centibeats at precision 2)."""
        return self.scaled % 10**self.precision

    def __str__(self) -> str:
        digits = f"{self.scaled:0{3 + self.precision}d}"
        if self.precision == 0:
            return digits
        return f"{digits[:3]}.{digits[3:]}"
