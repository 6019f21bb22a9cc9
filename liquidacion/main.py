from __future__ import annotations

import datetime as _dt
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from liquidacion.config import DIAS_ANIO, FECHA_MINIMA_2020, FECHA_MINIMA_2023, get_config
from liquidacion.services.calculo_liquidacion import calcular_liquidacion
from liquidacion.services.conciliacion import conciliar_liquidacion
from liquidacion.services.errores import LiquidacionError

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Liquidación Colombia - Motor")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# Models
# -----------------------------
class LiquidacionIn(BaseModel):
    salario: Optional[float] = Field(default=None, description="Si se omite, salario mínimo")
    fecha_ingreso: _dt.date
    fecha_egreso: _dt.date


class DeduccionesIn(BaseModel):
    primas: float = Field(default=0, ge=0)
    cesantias: float = Field(default=0, ge=0)
    intereses: float = Field(default=0, ge=0)
    vacaciones: float = Field(default=0, ge=0)


class ConciliacionIn(LiquidacionIn):
    deducciones: DeduccionesIn = Field(default_factory=DeduccionesIn)


def _unprocessable(e: LiquidacionError) -> HTTPException:
    logger.info("Liquidación rechazada (%s): %s", e.code, e)
    return HTTPException(status_code=422, detail=e.to_dict())


# -----------------------------
# Endpoints
# -----------------------------
@app.get("/api/meta")
def api_meta():
    cfg = get_config()
    return {
        "fecha_minima": cfg.fecha_minima.isoformat(),
        "salario_minimo": cfg.salario_minimo,
        "base_dias": DIAS_ANIO,
        "fechas_minimas_historicas": [FECHA_MINIMA_2020.isoformat(), FECHA_MINIMA_2023.isoformat()],
    }


@app.post("/api/calc/liquidacion")
def api_calc_liquidacion(inp: LiquidacionIn):
    try:
        return calcular_liquidacion(inp.model_dump())
    except LiquidacionError as e:
        raise _unprocessable(e)


@app.post("/api/calc/conciliacion")
def api_calc_conciliacion(inp: ConciliacionIn):
    try:
        return conciliar_liquidacion(inp.model_dump())
    except LiquidacionError as e:
        raise _unprocessable(e)
