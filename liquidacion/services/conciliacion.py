from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from .calculo_liquidacion import SeveranceEngine, engine_desde_payload
from .redondeo import round2

logger = logging.getLogger(__name__)

COMPONENTES = ("primas", "cesantias", "intereses", "vacaciones")

ETIQUETAS = {
    "primas": "Primas",
    "cesantias": "Cesantías",
    "intereses": "Intereses sobre cesantías",
    "vacaciones": "Vacaciones",
}


def _f(x: Any) -> float:
    if x is None:
        return 0.0
    return float(x)


@dataclass(frozen=True)
class DeductionRecord:
    primas: float = 0.0
    cesantias: float = 0.0
    intereses: float = 0.0
    vacaciones: float = 0.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DeductionRecord":
        desconocidos = sorted(str(k) for k in data if k not in COMPONENTES)
        if desconocidos:
            logger.warning("Deducciones ignoradas (concepto desconocido): %s", ", ".join(desconocidos))
        return cls(**{c: _f(data.get(c)) for c in COMPONENTES})

    def get(self, componente: str) -> float:
        return getattr(self, componente)

    def total(self) -> float:
        return sum(self.get(c) for c in COMPONENTES)


@dataclass(frozen=True)
class ComponentBalance:
    calculated: float
    paid: float
    remaining: float

    def to_dict(self) -> Dict[str, float]:
        return {"calculado": self.calculated, "pagado": self.paid, "restante": self.remaining}


@dataclass(frozen=True)
class ReconciliationResult:
    componentes: Dict[str, ComponentBalance]
    total_calculated: int
    total_deductions: float
    total_remaining: float
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "conceptos": {c: b.to_dict() for c, b in self.componentes.items()},
            "totales": {
                "total_calculado": self.total_calculated,
                "total_deducciones": self.total_deductions,
                "total_restante": self.total_remaining,
            },
            "advertencias": list(self.warnings),
        }


def _calculados(engine: SeveranceEngine) -> Dict[str, float]:
    return {
        "primas": engine.bonuses(),
        "cesantias": engine.savings(),
        "intereses": engine.interest_on_savings(),
        "vacaciones": engine.vacation(),
    }


def reconcile(
    engine: SeveranceEngine,
    deductions: Union[DeductionRecord, Mapping[str, Any]],
) -> ReconciliationResult:
    """Descuenta lo ya pagado de cada concepto.

    Un pago mayor al calculado genera una advertencia y un saldo negativo;
    nunca se interrumpe el cálculo.
    """
    if not isinstance(deductions, DeductionRecord):
        deductions = DeductionRecord.from_mapping(deductions)

    calculados = _calculados(engine)
    componentes: Dict[str, ComponentBalance] = {}
    warnings: List[str] = []

    for c in COMPONENTES:
        calculado = calculados[c]
        pagado = deductions.get(c)
        componentes[c] = ComponentBalance(calculated=calculado, paid=pagado, remaining=calculado - pagado)
        if pagado > calculado:
            msg = (
                f"{ETIQUETAS[c]}: la deducción ({round2(pagado):.2f}) supera el valor calculado ({round2(calculado):.2f})"
            )
            logger.warning(msg)
            warnings.append(msg)

    total_calculado = engine.total()
    total_deducciones = deductions.total()
    return ReconciliationResult(
        componentes=componentes,
        total_calculated=total_calculado,
        total_deductions=total_deducciones,
        total_remaining=total_calculado - total_deducciones,
        warnings=warnings,
    )


def conciliar_liquidacion(payload: Dict[str, Any]) -> Dict[str, Any]:
    engine = engine_desde_payload(payload)
    return reconcile(engine, payload.get("deducciones") or {}).to_dict()
