"""Room reservations, individual and group."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any, Iterable, Optional

from hostales.diccionario import OrderedDictionary
from hostales.estadias import Estadia

if TYPE_CHECKING:
    from hostales.fechas import Contexto


class Estado(enum.IntEnum):
    """State of a reservation."""

    ABIERTA = 0
    CERRADA = 1
    CANCELADA = 2


def _dias(checkin: datetime, checkout: datetime) -> float:
    return (checkout - checkin).total_seconds() / 86400


class Reserva:
    """A reservation of a room between two dates."""

    tipo: bool = False

    def __init__(
        self,
        codigo: int,
        checkin: datetime,
        checkout: datetime,
        estado: Estado,
        habitacion: Any,
    ) -> None:
        self.codigo = codigo
        self.checkin = checkin.replace(microsecond=0)
        self.checkout = checkout.replace(microsecond=0)
        self.estado = estado
        self.habitacion = habitacion
        self.estadias = OrderedDictionary()

    @property
    def grupal(self) -> bool:
        return self.tipo

    def pertenece_a_hostal(self, nombre_hostal: str) -> bool:
        """True if the reserved room belongs to the named hostel."""
        return self.habitacion.pertenece_a_hostal(nombre_hostal)

    def alta_estadia(
        self, huesped: Any, contexto: "Contexto", checkin: Optional[datetime] = None
    ) -> Estadia:
        """Start a stay for ``huesped`` and close the reservation.

        Without ``checkin`` the stay starts at the system date.
        """
        estadia = Estadia(
            codigo=contexto.nuevo_codigo_estadia(),
            checkin=checkin if checkin is not None else contexto.fecha_sistema,
            habitacion=self.habitacion,
            huesped=huesped,
        )
        self.estadias.add(estadia.codigo, estadia)
        self.estado = Estado.CERRADA
        return estadia

    def cantidad_estadias(self) -> int:
        """Number of stays started under this reservation."""
        return len(self.estadias)


class ReservaIndividual(Reserva):
    """Reservation made by a single guest; registers itself with the guest."""

    tipo = False

    def __init__(
        self,
        codigo: int,
        checkin: datetime,
        checkout: datetime,
        estado: Estado,
        habitacion: Any,
        huesped: Any,
    ) -> None:
        super().__init__(codigo, checkin, checkout, estado, habitacion)
        self.huesped = huesped
        self.costo = habitacion.precio * _dias(self.checkin, self.checkout)
        huesped.asignar_reserva(self)

    @property
    def nombre_huesped(self) -> str:
        return self.huesped.nombre


class ReservaGrupal(Reserva):
    """Reservation for several guests; registers itself with each of them."""

    tipo = True

    def __init__(
        self,
        codigo: int,
        checkin: datetime,
        checkout: datetime,
        estado: Estado,
        habitacion: Any,
        huespedes: Iterable[Any],
    ) -> None:
        super().__init__(codigo, checkin, checkout, estado, habitacion)
        encontrados = list(huespedes)
        self.costo = (
            habitacion.precio * _dias(self.checkin, self.checkout) * len(encontrados)
        )
        self.huespedes = OrderedDictionary()
        for huesped in encontrados:
            self.huespedes.add(huesped.email, huesped)
            huesped.asignar_reserva(self)

    @property
    def cantidad_huespedes(self) -> int:
        return len(self.huespedes)