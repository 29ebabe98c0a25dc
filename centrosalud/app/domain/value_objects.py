"""Utilidades internas de dominio."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Identificable(Protocol):
    """Capacidad común: toda entidad almacenable expone un id entero."""

    @property
    def id(self) -> int: ...


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def _format_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value)


def es_anterior(fecha: datetime, referencia: datetime) -> bool:
    """
    fecha < referencia aunque una tenga zona horaria y la otra no.

    La fecha sin zona se interpreta como hora local.
    """
    if (fecha.tzinfo is None) != (referencia.tzinfo is None):
        fecha = fecha.astimezone()
        referencia = referencia.astimezone()
    return fecha < referencia


def _texto_vacio(value: Optional[str]) -> bool:
    """True si el texto es None, vacío o solo espacios."""
    return value is None or not value.strip()
