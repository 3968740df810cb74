"""Guests: their reservations, stays and reviews."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from hostales.diccionario import OrderedDictionary
from hostales.usuarios import Usuario

if TYPE_CHECKING:
    from hostales.estadias import Estadia, Review
    from hostales.fechas import Contexto
    from hostales.respuestas import Respuesta


@dataclass(eq=False)
class Huesped(Usuario):
    """A guest, holding its reservations and stays by code."""

    es_tecno: bool = False
    reservas_individuales: OrderedDictionary = field(default_factory=OrderedDictionary)
    reservas_grupales: OrderedDictionary = field(default_factory=OrderedDictionary)
    estadias: OrderedDictionary = field(default_factory=OrderedDictionary)

    def asignar_reserva(self, reserva: Any) -> None:
        """Record a reservation the guest takes part in."""
        destino = self.reservas_grupales if reserva.tipo else self.reservas_individuales
        destino.add(reserva.codigo, reserva)

    def alta_estadia(
        self,
        codigo_reserva: int,
        contexto: "Contexto",
        checkin: Optional[datetime] = None,
    ) -> Optional["Estadia"]:
        """Start a stay under one of the guest's reservations.

        Returns None if the guest has no reservation with that code.
        """
        reserva = self.reservas_individuales.find(codigo_reserva)
        if reserva is None:
            reserva = self.reservas_grupales.find(codigo_reserva)
        if reserva is None:
            return None
        return reserva.alta_estadia(self, contexto, checkin)

    def asignar_estadia(self, estadia: "Estadia") -> None:
        """Record a stay of the guest."""
        self.estadias.add(estadia.codigo, estadia)

    def _estadia(self, codigo_estadia: int) -> "Estadia":
        estadia = self.estadias.find(codigo_estadia)
        if estadia is None:
            raise KeyError(f"guest {self.email!r} has no stay {codigo_estadia}")
        return estadia

    def estadia_activa(self, nombre_hostal: str) -> Optional[int]:
        """Code of an open stay of the guest at the named hostel, or None."""
        return next(
            (e.codigo for e in self.estadias if e.no_finalizo(nombre_hostal)), None
        )

    def finalizar_estadia(self, codigo_estadia: int, checkout: datetime) -> None:
        """Close one of the guest's stays at ``checkout``."""
        self._estadia(codigo_estadia).finalizar(checkout)

    def estadias_finalizadas(self, nombre_hostal: str) -> list["Estadia"]:
        """The guest's finished stays at the named hostel."""
        return [e for e in self.estadias if e.finalizo(nombre_hostal)]

    def calificar_hostal(
        self,
        hostal: Any,
        codigo_estadia: int,
        comentario: str,
        calificacion: int,
        contexto: "Contexto",
        fecha: Optional[datetime] = None,
    ) -> "Review":
        """Review the hostel for one of the guest's stays."""
        return self._estadia(codigo_estadia).agregar_calificacion(
            hostal, comentario, calificacion, contexto, fecha
        )

    def comentarios_sin_responder(self, nombre_hostal: str) -> list["Review"]:
        """The guest's unanswered reviews of the named hostel."""
        reviews = []
        for estadia in self.estadias:
            if estadia.pertenece_a(nombre_hostal):
                review = estadia.review_sin_responder()
                if review is not None:
                    reviews.append(review)
        return reviews

    def alta_respuesta(
        self,
        codigo_review: int,
        empleado: Any,
        respuesta: str,
        fecha: Optional[datetime] = None,
    ) -> Optional["Respuesta"]:
        """Reply to the guest's review with this code; None if the guest has none."""
        for estadia in self.estadias:
            if estadia.coincide(codigo_review):
                return estadia.alta_respuesta(empleado, respuesta, fecha)
        return None

    def contar_estadias_activas(self, nombre_hostal: Optional[str] = None) -> int:
        """Number of open stays, optionally only those at the named hostel."""
        return sum(1 for e in self.estadias if e.no_finalizo(nombre_hostal))