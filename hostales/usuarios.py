"""Users of the system: the common user data and hostel employees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Usuario:
    """A registered user, identified by e-mail."""

    nombre: str
    email: str
    contrasena: str


@dataclass(eq=False)
class Empleado(Usuario):
    """A hostel employee with a position, possibly assigned to a hostel."""

    cargo: Any = None
    hostal: Optional[Any] = None

    @property
    def nombre_hostal(self) -> str:
        """Name of the hostel the employee works at, or an empty string."""
        return self.hostal.nombre if self.hostal is not None else ""

    def asignar_cargo(self, cargo: Any, hostal: Any) -> None:
        """Give the employee a position at a hostel."""
        self.cargo = cargo
        self.hostal = hostal