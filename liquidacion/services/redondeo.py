from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP


def round0(x: float) -> int:
    """Redondeo a entero, .5 se aleja de cero (half up)."""
    return int(Decimal(str(x)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round2(x: float) -> float:
    """Redondeo a 2 decimales (half up) para importes."""
    return float(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
