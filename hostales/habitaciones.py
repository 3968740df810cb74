"""Hostel rooms and the reservations made for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional

from hostales.diccionario import OrderedDictionary
from hostales.reservas import Estado, ReservaGrupal, ReservaIndividual


@dataclass(eq=False)
class Habitacion:
    """A room of a hostel, holding its reservations by code."""

    numero: int
    precio: float
    capacidad: int
    hostal: Optional[Any] = None
    reservas: OrderedDictionary = field(default_factory=OrderedDictionary)
    estadias: OrderedDictionary = field(default_factory=OrderedDictionary)

    def pertenece_a_hostal(self, nombre_hostal: str) -> bool:
        """True if the room belongs to the named hostel."""
        return self.hostal is not None and self.hostal.nombre == nombre_hostal

    def crear_reserva_individual(
        self, codigo: int, huesped: Any, checkin: datetime, checkout: datetime
    ) -> ReservaIndividual:
        """Create an open individual reservation for this room."""
        reserva = ReservaIndividual(
            codigo, checkin, checkout, Estado.ABIERTA, self, huesped
        )
        self.reservas.add(reserva.codigo, reserva)
        return reserva

    def crear_reserva_grupal(
        self,
        codigo: int,
        huespedes: Iterable[Any],
        checkin: datetime,
        checkout: datetime,
    ) -> ReservaGrupal:
        """Create an open group reservation for this room."""
        reserva = ReservaGrupal(
            codigo, checkin, checkout, Estado.ABIERTA, self, huespedes
        )
        self.reservas.add(reserva.codigo, reserva)
        return reserva