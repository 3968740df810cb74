"""System date handling, date comparison and the running code counters."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime


class ComparacionFecha(enum.IntEnum):
    """Position of one date relative to another."""

    MENOR = 0
    IGUAL = 1
    MAYOR = 2


def _al_segundo(fecha: datetime) -> datetime:
    return fecha.replace(microsecond=0)


def comparar_fechas(primera: datetime, segunda: datetime) -> ComparacionFecha:
    """Tell whether ``primera`` is before, after or equal to ``segunda``.

    Dates are compared to the second.
    """
    a, b = _al_segundo(primera), _al_segundo(segunda)
    if a < b:
        return ComparacionFecha.MENOR
    if a > b:
        return ComparacionFecha.MAYOR
    return ComparacionFecha.IGUAL


def fechas_no_solapan(
    ocupada_checkin: datetime,
    ocupada_checkout: datetime,
    checkin: datetime,
    checkout: datetime,
) -> bool:
    """Return True if the wanted range does not overlap the occupied one.

    The wanted range must lie entirely at or before the occupied check-in,
    or entirely at or after the occupied check-out.
    """
    oc_in, oc_out = _al_segundo(ocupada_checkin), _al_segundo(ocupada_checkout)
    d_in, d_out = _al_segundo(checkin), _al_segundo(checkout)
    if d_in <= oc_in and d_out <= oc_in:
        return True
    if d_in >= oc_out and d_out >= oc_out:
        return True
    return False


def _ahora() -> datetime:
    return datetime.now().replace(microsecond=0)


@dataclass
class Contexto:
    """Shared state of a running system: its date and the next codes to hand out."""

    fecha_sistema: datetime = field(default_factory=_ahora)
    contador_reserva: int = 1
    contador_estadia: int = 1
    contador_review: int = 1

    def __post_init__(self) -> None:
        self.fecha_sistema = _al_segundo(self.fecha_sistema)

    def comparar_con_sistema(self, fecha: datetime) -> ComparacionFecha:
        """Compare ``fecha`` against the system date."""
        return comparar_fechas(fecha, self.fecha_sistema)

    def nuevo_codigo_reserva(self) -> int:
        """Return the next reservation code and advance the counter."""
        codigo = self.contador_reserva
        self.contador_reserva += 1
        return codigo

    def nuevo_codigo_estadia(self) -> int:
        """Return the next stay code and advance the counter."""
        codigo = self.contador_estadia
        self.contador_estadia += 1
        return codigo

    def nuevo_codigo_review(self) -> int:
        """Return the next review code and advance the counter."""
        codigo = self.contador_review
        self.contador_review += 1
        return codigo