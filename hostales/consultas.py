"""Read-only queries over the system's hostels, users, reservations and stays."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Optional

from hostales.diccionario import OrderedDictionary
from hostales.estadias import Estadia, Review
from hostales.hostal import Hostal
from hostales.reservas import Estado, Reserva
from hostales.usuarios import Empleado

if TYPE_CHECKING:
    from hostales.sistema import Sistema


def _por_codigo(elementos: Iterable[Any]) -> list[Any]:
    """Deduplicate by code and return in the order of integer keys."""
    indice = OrderedDictionary()
    for elemento in elementos:
        indice.add(elemento.codigo, elemento)
    return list(indice)


def obtener_hostales(sistema: "Sistema") -> list[Hostal]:
    """All hostels, ordered by name."""
    return list(sistema.hostales)


def obtener_no_empleados_hostal(sistema: "Sistema", nombre_hostal: str) -> list[Empleado]:
    """Employees that do not work at the named hostel, ordered by e-mail."""
    hostal = sistema.buscar_hostal(nombre_hostal)
    return [e for e in sistema.empleados if not hostal.tiene_empleado(e.email)]


def obtener_usuarios(sistema: "Sistema") -> list[str]:
    """E-mails of every guest and employee, sorted and without repeats."""
    emails = OrderedDictionary()
    for usuario in [*sistema.huespedes, *sistema.empleados]:
        emails.add(usuario.email, usuario.email)
    return list(emails)


def obtener_huespedes(sistema: "Sistema") -> list[str]:
    """E-mails of every guest, sorted."""
    return [huesped.email for huesped in sistema.huespedes]


def obtener_empleados(sistema: "Sistema") -> list[str]:
    """E-mails of every employee, sorted."""
    return [empleado.email for empleado in sistema.empleados]


def obtener_reserva_usuario(
    sistema: "Sistema", nombre_hostal: str, email: str
) -> list[Reserva]:
    """A guest's reservations: the open ones at the named hostel plus every closed one."""
    huesped = sistema.buscar_huesped(email)

    def incluir(reserva: Reserva) -> bool:
        return (
            reserva.pertenece_a_hostal(nombre_hostal)
            and reserva.estado is Estado.ABIERTA
        ) or reserva.estado is Estado.CERRADA

    reservas = [*huesped.reservas_individuales, *huesped.reservas_grupales]
    return _por_codigo(r for r in reservas if incluir(r))


def obtener_reservas_hostal(sistema: "Sistema", nombre_hostal: str) -> list[Reserva]:
    """Every reservation of every room of the named hostel."""
    hostal = sistema.buscar_hostal(nombre_hostal)
    return _por_codigo(
        reserva for habitacion in hostal.habitaciones for reserva in habitacion.reservas
    )


def existe_estadia(
    sistema: "Sistema", nombre_hostal: str, email_huesped: str
) -> Optional[int]:
    """Code of an open stay of the guest at the named hostel, or None."""
    return sistema.buscar_huesped(email_huesped).estadia_activa(nombre_hostal)


def obtener_estadias_fin_huesped(
    sistema: "Sistema", nombre_hostal: str, email_huesped: str
) -> list[Estadia]:
    """The guest's finished stays at the named hostel."""
    return sistema.buscar_huesped(email_huesped).estadias_finalizadas(nombre_hostal)


def listar_comentarios_sin_responder(
    sistema: "Sistema", email_empleado: str
) -> list[Review]:
    """Unanswered reviews of the hostel the employee works at.

    Raises ValueError if the employee is not assigned to a hostel.
    """
    empleado = sistema.buscar_empleado(email_empleado)
    if empleado.hostal is None:
        raise ValueError(f"employee {email_empleado!r} is not assigned to a hostel")
    nombre = empleado.hostal.nombre
    return _por_codigo(
        review
        for huesped in sistema.huespedes
        for review in huesped.comentarios_sin_responder(nombre)
    )


def contar_estadias_activas(
    sistema: "Sistema", email_huesped: str, nombre_hostal: Optional[str] = None
) -> int:
    """Number of the guest's open stays, optionally only at the named hostel."""
    return sistema.buscar_huesped(email_huesped).contar_estadias_activas(nombre_hostal)