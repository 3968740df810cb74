"""Room availability and hostel ranking queries."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from hostales.diccionario import OrderedDictionary
from hostales.fechas import fechas_no_solapan
from hostales.habitaciones import Habitacion
from hostales.hostal import Hostal

if TYPE_CHECKING:
    from hostales.sistema import Sistema


def _sin_solapamientos(
    habitacion: Habitacion, checkin: datetime, checkout: datetime
) -> bool:
    """True if none of the room's reservations overlaps the wanted range."""
    return all(
        fechas_no_solapan(reserva.checkin, reserva.checkout, checkin, checkout)
        for reserva in habitacion.reservas
    )


def obtener_habitaciones_individuales(
    sistema: "Sistema", nombre_hostal: str, checkin: datetime, checkout: datetime
) -> list[Habitacion]:
    """Rooms of a hostel free for a single guest between the two dates.

    A room without reservations is always offered. A room with
    reservations is offered when its capacity is at least one and none of
    them overlaps the wanted range. Rooms come in the hostel's room order.
    """
    hostal = sistema.buscar_hostal(nombre_hostal)
    return [
        habitacion
        for habitacion in hostal.habitaciones
        if habitacion.reservas.is_empty()
        or (
            habitacion.capacidad >= 1
            and _sin_solapamientos(habitacion, checkin, checkout)
        )
    ]


def obtener_habitaciones_grupales(
    sistema: "Sistema", nombre_hostal: str, checkin: datetime, checkout: datetime
) -> list[Habitacion]:
    """Rooms of a hostel free for a group between the two dates.

    Only rooms for more than one guest are offered, and only when none of
    their reservations overlaps the wanted range.
    """
    hostal = sistema.buscar_hostal(nombre_hostal)
    return [
        habitacion
        for habitacion in hostal.habitaciones
        if habitacion.capacidad > 1
        and _sin_solapamientos(habitacion, checkin, checkout)
    ]


def obtener_capacidad_habitacion(
    sistema: "Sistema", numero_habitacion: int, nombre_hostal: str
) -> int:
    """Capacity of a room of a hostel; KeyError if the room does not exist."""
    hostal = sistema.buscar_hostal(nombre_hostal)
    habitacion = hostal.habitaciones.find(numero_habitacion)
    if habitacion is None:
        raise KeyError(f"no room {numero_habitacion} in hostel {nombre_hostal!r}")
    return habitacion.capacidad


def obtener_top_3_hostales(sistema: "Sistema") -> list[Hostal]:
    """The three best-rated hostels, first place first.

    Ties go to the hostel whose name sorts last. With hostels registered
    but fewer than three of them, the remaining places hold an empty
    hostel. With no hostels at all the result is empty.
    """
    restantes = OrderedDictionary()
    for hostal in sistema.hostales:
        restantes.add(hostal.nombre, hostal)
    if restantes.is_empty():
        return []

    podio: list[Hostal] = []
    for _ in range(3):
        maximo = Hostal()
        for hostal in restantes:
            if hostal.promedio() >= maximo.promedio():
                maximo = hostal
        podio.append(maximo)
        restantes.remove(maximo.nombre)
    return podio