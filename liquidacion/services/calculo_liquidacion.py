"""
Liquidación de prestaciones sociales (Colombia).

Año comercial de 360 días; lo trabajado por encima de un año no aumenta
primas, cesantías, intereses ni vacaciones.
"""
from __future__ import annotations

import datetime as _dt
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from liquidacion.config import DIAS_ANIO, get_config
from .errores import DateTooEarly, InvalidDateRange, InvalidSalary
from .redondeo import round0

logger = logging.getLogger(__name__)

FechaIn = Union[_dt.date, str]

TASA_INTERES_CESANTIAS = 0.12


def _parse_date(s: Any) -> _dt.date:
    """Acepta date, datetime (se usa la fecha) o texto ISO 'YYYY-MM-DD'."""
    if isinstance(s, _dt.datetime):
        return s.date()
    if isinstance(s, _dt.date):
        return s
    if not s:
        raise ValueError("Fecha requerida")
    try:
        # se descarta la hora de 'YYYY-MM-DDTHH:MM' o 'YYYY-MM-DD HH:MM'
        return _dt.date.fromisoformat(str(s).strip().split("T")[0].split(" ")[0])
    except ValueError:
        raise ValueError(f"Formato de fecha inválido (YYYY-MM-DD): {s!r}")


def _parse_salary(salary: Any) -> Union[int, float]:
    if isinstance(salary, bool):
        raise InvalidSalary("El salario debe ser mayor a cero")
    try:
        v = float(salary)
    except (TypeError, ValueError, OverflowError):
        raise InvalidSalary("El salario debe ser mayor a cero")
    if not math.isfinite(v) or v < 1:
        raise InvalidSalary("El salario debe ser mayor a cero")
    return salary if isinstance(salary, int) else v


@dataclass(frozen=True)
class PeriodInput:
    salary: Union[int, float]
    start_date: _dt.date
    end_date: _dt.date


@dataclass(frozen=True)
class CalculationResult:
    days_worked: int
    bonuses: float
    savings: float
    interest_on_savings: int
    vacation: float
    total: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meta": {
                "dias_trabajados": self.days_worked,
                "base_dias": DIAS_ANIO,
            },
            "conceptos": {
                "primas": self.bonuses,
                "cesantias": self.savings,
                "intereses_cesantias": self.interest_on_savings,
                "vacaciones": self.vacation,
            },
            "totales": {
                "total_liquidacion": self.total,
            },
        }


def validar_periodo(
    salary: Any,
    start_date: FechaIn,
    end_date: FechaIn,
    fecha_minima: Optional[_dt.date] = None,
) -> PeriodInput:
    """Valida salario y fechas; lanza InvalidSalary / DateTooEarly / InvalidDateRange."""
    salario = _parse_salary(salary)
    ingreso = _parse_date(start_date)
    egreso = _parse_date(end_date)

    minima = fecha_minima if fecha_minima is not None else get_config().fecha_minima
    if ingreso < minima:
        raise DateTooEarly(f"La fecha de ingreso no puede ser anterior al {minima.isoformat()}")
    if egreso <= ingreso:
        raise InvalidDateRange("La fecha de egreso debe ser posterior a la fecha de ingreso")

    return PeriodInput(salary=salario, start_date=ingreso, end_date=egreso)


class SeveranceEngine:
    """Calculadora inmutable de una liquidación.

    Se construye una por solicitud; los resultados dependen sólo del salario
    y las fechas validadas en el constructor.
    """

    __slots__ = ("_periodo",)

    def __init__(
        self,
        salary: Any,
        start_date: FechaIn,
        end_date: FechaIn,
        *,
        fecha_minima: Optional[_dt.date] = None,
    ):
        periodo = validar_periodo(salary, start_date, end_date, fecha_minima)
        object.__setattr__(self, "_periodo", periodo)
        logger.debug(
            "Liquidación %s -> %s salario=%s", periodo.start_date, periodo.end_date, periodo.salary
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SeveranceEngine es inmutable")

    def __repr__(self) -> str:
        p = self._periodo
        return f"SeveranceEngine(salary={p.salary!r}, start_date={p.start_date}, end_date={p.end_date})"

    @property
    def periodo(self) -> PeriodInput:
        return self._periodo

    @property
    def salary(self) -> Union[int, float]:
        return self._periodo.salary

    @property
    def start_date(self) -> _dt.date:
        return self._periodo.start_date

    @property
    def end_date(self) -> _dt.date:
        return self._periodo.end_date

    def days_worked(self) -> int:
        dias = (self._periodo.end_date - self._periodo.start_date).days
        return min(dias, DIAS_ANIO)

    def bonuses(self) -> float:
        """Primas."""
        return (self.salary * self.days_worked()) / DIAS_ANIO

    def savings(self) -> float:
        """Cesantías: misma fórmula que las primas."""
        return self.bonuses()

    def interest_on_savings(self) -> int:
        """Intereses sobre cesantías (12% anual proporcional), redondeado a entero."""
        return round0((self.savings() * self.days_worked() * TASA_INTERES_CESANTIAS) / DIAS_ANIO)

    def vacation(self) -> float:
        """Vacaciones: 15 días por cada 360."""
        return (self.salary * self.days_worked()) / (DIAS_ANIO * 2)

    def total(self) -> int:
        # un solo redondeo sobre la suma
        return round0(self.bonuses() + self.savings() + self.interest_on_savings() + self.vacation())

    def resultado(self) -> CalculationResult:
        return CalculationResult(
            days_worked=self.days_worked(),
            bonuses=self.bonuses(),
            savings=self.savings(),
            interest_on_savings=self.interest_on_savings(),
            vacation=self.vacation(),
            total=self.total(),
        )


def engine_desde_payload(payload: Dict[str, Any]) -> SeveranceEngine:
    """Arma el engine desde un dict; sin salario se usa el salario mínimo configurado."""
    salario = payload.get("salario")
    if salario is None:
        salario = get_config().salario_minimo
    return SeveranceEngine(salario, payload.get("fecha_ingreso"), payload.get("fecha_egreso"))


def calcular_liquidacion(payload: Dict[str, Any]) -> Dict[str, Any]:
    engine = engine_desde_payload(payload)
    out = engine.resultado().to_dict()
    out["meta"].update({
        "salario": engine.salary,
        "fecha_ingreso": engine.start_date.isoformat(),
        "fecha_egreso": engine.end_date.isoformat(),
    })
    return out
