from __future__ import annotations


class LiquidacionError(ValueError):
    """Error de validación de los datos de la liquidación."""

    code = "LIQUIDACION_ERROR"

    def to_dict(self) -> dict:
        return {"code": self.code, "mensaje": str(self)}


class InvalidSalary(LiquidacionError):
    code = "INVALID_SALARY"


class DateTooEarly(LiquidacionError):
    code = "DATE_TOO_EARLY"


class InvalidDateRange(LiquidacionError):
    code = "INVALID_DATE_RANGE"
