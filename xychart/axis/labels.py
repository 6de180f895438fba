from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass
class LabelFormat:
    """printf-style tick label formatting shared by the number axes."""

    tick_format: str = "%.2f"
    multiplier: float = 1.0
    integer_values: bool = False

    def format(self, value: float) -> str:
        scaled = value * self.multiplier
        if scaled == 0:
            scaled = 0.0
        if self.integer_values and math.isfinite(scaled):
            out = "%i" % int(scaled)
        else:
            out = self.tick_format % scaled
        if _is_negative_zero(out):
            out = out[1:]
        return out


def _is_negative_zero(label: str) -> bool:
    # "-0.00", "-0", "-0.00e+00": a sign in front of a mantissa with no non-zero digit.
    if not label.startswith("-"):
        return False
    mantissa = label[1:].lower().split("e", 1)[0]
    return any(ch == "0" for ch in mantissa) and not any(ch in "123456789" for ch in mantissa)
