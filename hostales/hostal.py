"""Hostels: their rooms, employees and reviews."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from hostales.diccionario import OrderedDictionary
from hostales.habitaciones import Habitacion
from hostales.reservas import ReservaGrupal, ReservaIndividual


@dataclass(eq=False)
class Hostal:
    """A hostel, holding its rooms by number, reviews by code and employees by e-mail."""

    nombre: str = ""
    direccion: str = ""
    telefono: str = ""
    promedio_inicial: float = 0.0
    habitaciones: OrderedDictionary = field(default_factory=OrderedDictionary)
    reviews: OrderedDictionary = field(default_factory=OrderedDictionary)
    empleados: OrderedDictionary = field(default_factory=OrderedDictionary)

    def promedio(self) -> float:
        """Mean rating of the hostel's reviews, or the initial average if it has none."""
        calificaciones = [review.calificacion for review in self.reviews]
        if not calificaciones:
            return self.promedio_inicial
        return sum(calificaciones) / len(calificaciones)

    def tiene_empleado(self, email: str) -> bool:
        """True if an employee with this e-mail works at the hostel."""
        return self.empleados.member(email)

    def alta_habitacion(self, numero: int, precio: float, capacidad: int) -> Habitacion:
        """Add a room to the hostel, replacing any room with the same number."""
        habitacion = Habitacion(numero, precio, capacidad, hostal=self)
        self.habitaciones.add(habitacion.numero, habitacion)
        return habitacion

    def asignar_empleado(self, empleado: Any) -> None:
        """Register an employee as working at the hostel."""
        self.empleados.add(empleado.email, empleado)

    def asignar_review(self, review: Any) -> None:
        """Register a review of the hostel under its code."""
        self.reviews.add(review.codigo, review)

    def _habitacion(self, numero_habitacion: int) -> Habitacion:
        habitacion = self.habitaciones.find(numero_habitacion)
        if habitacion is None:
            raise KeyError(f"no room {numero_habitacion} in hostel {self.nombre!r}")
        return habitacion

    def agregar_reserva_individual(
        self,
        codigo: int,
        numero_habitacion: int,
        huesped: Any,
        checkin: datetime,
        checkout: datetime,
    ) -> ReservaIndividual:
        """Reserve one of the hostel's rooms for a single guest."""
        return self._habitacion(numero_habitacion).crear_reserva_individual(
            codigo, huesped, checkin, checkout
        )

    def agregar_reserva_grupal(
        self,
        codigo: int,
        numero_habitacion: int,
        huespedes: Iterable[Any],
        checkin: datetime,
        checkout: datetime,
    ) -> ReservaGrupal:
        """Reserve one of the hostel's rooms for a group of guests."""
        return self._habitacion(numero_habitacion).crear_reserva_grupal(
            codigo, huespedes, checkin, checkout
        )