"""Replies written by employees to guest reviews."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from hostales.usuarios import Empleado


@dataclass
class Respuesta:
    """An employee's reply to a review, with the date it was written if known."""

    comentario: str
    empleado: "Empleado"
    fecha: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.fecha is not None:
            self.fecha = self.fecha.replace(microsecond=0)