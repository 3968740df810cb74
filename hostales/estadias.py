"""Stays at a room and the reviews guests leave for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from hostales.respuestas import Respuesta

if TYPE_CHECKING:
    from hostales.fechas import Contexto


@dataclass
class Review:
    """A guest's rating and comment about a hostel."""

    codigo: int
    fecha: datetime
    calificacion: int
    comentario: str
    hostal: Any
    respuesta: Optional[Respuesta] = None

    def __post_init__(self) -> None:
        self.fecha = self.fecha.replace(microsecond=0)

    def sin_responder(self) -> bool:
        """True while no employee has replied."""
        return self.respuesta is None

    def alta_respuesta(
        self, empleado: Any, respuesta: str, fecha: Optional[datetime] = None
    ) -> Respuesta:
        """Attach an employee's reply, replacing any earlier one."""
        self.respuesta = Respuesta(respuesta, empleado, fecha)
        return self.respuesta


@dataclass(eq=False)
class Estadia:
    """A guest's stay in a room; registers itself with the guest on creation."""

    codigo: int
    checkin: datetime
    habitacion: Any
    huesped: Any
    checkout: Optional[datetime] = None
    review: Optional[Review] = None
    promo: str = field(default="")

    def __post_init__(self) -> None:
        self.checkin = self.checkin.replace(microsecond=0)
        if self.checkout is not None:
            self.checkout = self.checkout.replace(microsecond=0)
        self.huesped.asignar_estadia(self)

    @property
    def email(self) -> str:
        return self.huesped.email

    def pertenece_a(self, nombre_hostal: str) -> bool:
        """True if the stay's room belongs to the named hostel."""
        return self.habitacion.pertenece_a_hostal(nombre_hostal)

    def finalizar(self, checkout: datetime) -> None:
        """Close the stay at ``checkout``."""
        self.checkout = checkout.replace(microsecond=0)

    def finalizo(self, nombre_hostal: str) -> bool:
        """True if the stay has ended and belongs to the named hostel."""
        return self.checkout is not None and self.pertenece_a(nombre_hostal)

    def no_finalizo(self, nombre_hostal: Optional[str] = None) -> bool:
        """True if the stay is still open (and, if a hostel is named, belongs to it)."""
        if self.checkout is not None:
            return False
        if nombre_hostal is None:
            return True
        return self.pertenece_a(nombre_hostal)

    def agregar_calificacion(
        self,
        hostal: Any,
        comentario: str,
        calificacion: int,
        contexto: "Contexto",
        fecha: Optional[datetime] = None,
    ) -> Review:
        """Create a review for this stay and register it with the hostel.

        Without ``fecha`` the review is dated with the system date.
        """
        review = Review(
            codigo=contexto.nuevo_codigo_review(),
            fecha=fecha if fecha is not None else contexto.fecha_sistema,
            calificacion=calificacion,
            comentario=comentario,
            hostal=hostal,
        )
        self.review = review
        hostal.asignar_review(review)
        return review

    def sin_review(self) -> bool:
        """True if the stay has not been reviewed yet."""
        return self.review is None

    def review_sin_responder(self) -> Optional[Review]:
        """The stay's review if it exists and has no reply, else None."""
        if self.review is not None and self.review.sin_responder():
            return self.review
        return None

    def coincide(self, codigo_review: int) -> bool:
        """True if the stay's review has the given code."""
        return self.review is not None and self.review.codigo == codigo_review

    def alta_respuesta(
        self, empleado: Any, respuesta: str, fecha: Optional[datetime] = None
    ) -> Respuesta:
        """Reply to this stay's review."""
        if self.review is None:
            raise ValueError("the stay has no review to reply to")
        return self.review.alta_respuesta(empleado, respuesta, fecha)