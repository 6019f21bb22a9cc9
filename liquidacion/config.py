"""
config.py
Parámetros de la liquidación que el host puede sobreescribir por entorno:
- LIQ_FECHA_MINIMA: primera fecha de ingreso admitida (YYYY-MM-DD)
- LIQ_SALARIO_MINIMO: salario mínimo usado cuando no se informa salario
- LOG_LEVEL / LIQ_CORS_ORIGINS: ambiente del servidor
"""
from __future__ import annotations

import datetime as _dt
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


# La fecha mínima cambió entre versiones del calculador; ambas quedan nombradas.
FECHA_MINIMA_2020 = _dt.date(2020, 1, 1)
FECHA_MINIMA_2023 = _dt.date(2023, 1, 1)

FECHA_MINIMA_DEFAULT = FECHA_MINIMA_2020
SALARIO_MINIMO_DEFAULT = 877803

# Año comercial
DIAS_ANIO = 360


@dataclass(frozen=True)
class ConfigLiquidacion:
    fecha_minima: _dt.date = FECHA_MINIMA_DEFAULT
    salario_minimo: float = SALARIO_MINIMO_DEFAULT
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)


def _env_date(name: str, default: _dt.date) -> _dt.date:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return _dt.date.fromisoformat(raw.strip()[:10])
    except ValueError:
        raise ValueError(f"{name} debe tener formato YYYY-MM-DD (recibido {raw!r})")


def _env_amount(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        v = float(raw.strip())
    except ValueError:
        raise ValueError(f"{name} debe ser numérico (recibido {raw!r})")
    if v < 1:
        raise ValueError(f"{name} debe ser mayor o igual a 1 (recibido {raw!r})")
    return int(v) if v.is_integer() else v


@lru_cache(maxsize=1)
def get_config() -> ConfigLiquidacion:
    """Lee la configuración del entorno (cacheada; usar get_config.cache_clear() para releer)."""
    origins = os.getenv("LIQ_CORS_ORIGINS", "*")
    return ConfigLiquidacion(
        fecha_minima=_env_date("LIQ_FECHA_MINIMA", FECHA_MINIMA_DEFAULT),
        salario_minimo=_env_amount("LIQ_SALARIO_MINIMO", SALARIO_MINIMO_DEFAULT),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
    )
