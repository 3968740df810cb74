"""The system's entry point: the registered hostels, guests and employees."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Optional

from hostales.diccionario import OrderedDictionary
from hostales.estadias import Estadia, Review
from hostales.fechas import ComparacionFecha, Contexto
from hostales.habitaciones import Habitacion
from hostales.hostal import Hostal
from hostales.huespedes import Huesped
from hostales.reservas import Estado, Reserva, ReservaGrupal, ReservaIndividual
from hostales.respuestas import Respuesta
from hostales.usuarios import Empleado


class Sistema:
    """Holds hostels by name and guests and employees by e-mail.

    All use cases of the application go through this object; the shared
    date and code counters live in its ``contexto``.
    """

    def __init__(self, contexto: Optional[Contexto] = None) -> None:
        self.contexto = contexto if contexto is not None else Contexto()
        self.hostales = OrderedDictionary()
        self.huespedes = OrderedDictionary()
        self.empleados = OrderedDictionary()

    @property
    def fecha_sistema(self) -> datetime:
        """The system date."""
        return self.contexto.fecha_sistema

    @fecha_sistema.setter
    def fecha_sistema(self, fecha: datetime) -> None:
        self.contexto.fecha_sistema = fecha.replace(microsecond=0)

    # Lookups

    def buscar_hostal(self, nombre: str) -> Hostal:
        """The hostel with this name; KeyError if there is none."""
        hostal = self.hostales.find(nombre)
        if hostal is None:
            raise KeyError(f"no hostel named {nombre!r}")
        return hostal

    def buscar_huesped(self, email: str) -> Huesped:
        """The guest with this e-mail; KeyError if there is none."""
        huesped = self.huespedes.find(email)
        if huesped is None:
            raise KeyError(f"no guest with e-mail {email!r}")
        return huesped

    def buscar_empleado(self, email: str) -> Empleado:
        """The employee with this e-mail; KeyError if there is none."""
        empleado = self.empleados.find(email)
        if empleado is None:
            raise KeyError(f"no employee with e-mail {email!r}")
        return empleado

    # Use cases

    def alta_huesped(
        self, nombre: str, email: str, contrasena: str, es_tecno: bool
    ) -> Huesped:
        """Register a guest, replacing any guest with the same e-mail."""
        huesped = Huesped(nombre, email, contrasena, es_tecno)
        self.huespedes.add(email, huesped)
        return huesped

    def alta_empleado(
        self, nombre: str, email: str, contrasena: str, cargo: Any
    ) -> Empleado:
        """Register an employee, replacing any employee with the same e-mail."""
        empleado = Empleado(nombre, email, contrasena, cargo)
        self.empleados.add(email, empleado)
        return empleado

    def alta_hostal(self, nombre: str, direccion: str, telefono: str) -> Hostal:
        """Register a hostel, replacing any hostel with the same name."""
        hostal = Hostal(nombre, direccion, telefono)
        self.hostales.add(nombre, hostal)
        return hostal

    def alta_habitacion(
        self, nombre_hostal: str, numero: int, precio: float, capacidad: int
    ) -> Habitacion:
        """Add a room to a hostel; ValueError if the number is already taken."""
        hostal = self.buscar_hostal(nombre_hostal)
        if hostal.habitaciones.member(numero):
            raise ValueError(
                "El número de habitación que ingresaste ya existe en el hostal!"
            )
        return hostal.alta_habitacion(numero, precio, capacidad)

    def asignar_empleado_hostal(
        self, nombre_hostal: str, email_empleado: str, cargo: Any
    ) -> None:
        """Give an employee a position at a hostel."""
        hostal = self.buscar_hostal(nombre_hostal)
        empleado = self.buscar_empleado(email_empleado)
        empleado.asignar_cargo(cargo, hostal)
        hostal.asignar_empleado(empleado)

    def alta_reserva_individual(
        self,
        nombre_hostal: str,
        numero_habitacion: int,
        email_huesped: str,
        checkin: datetime,
        checkout: datetime,
    ) -> ReservaIndividual:
        """Reserve a room for one guest under the next reservation code."""
        hostal = self.buscar_hostal(nombre_hostal)
        huesped = self.buscar_huesped(email_huesped)
        reserva = hostal.agregar_reserva_individual(
            self.contexto.contador_reserva, numero_habitacion, huesped, checkin, checkout
        )
        self.contexto.nuevo_codigo_reserva()
        return reserva

    def alta_reserva_grupal(
        self,
        nombre_hostal: str,
        numero_habitacion: int,
        emails: Iterable[str],
        checkin: datetime,
        checkout: datetime,
    ) -> ReservaGrupal:
        """Reserve a room for the guests with these e-mails."""
        hostal = self.buscar_hostal(nombre_hostal)
        encontrados = OrderedDictionary()
        for email in emails:
            encontrados.add(email, self.buscar_huesped(email))
        reserva = hostal.agregar_reserva_grupal(
            self.contexto.contador_reserva,
            numero_habitacion,
            encontrados,
            checkin,
            checkout,
        )
        self.contexto.nuevo_codigo_reserva()
        return reserva

    def alta_estadia(
        self,
        codigo_reserva: int,
        email_huesped: str,
        checkin: Optional[datetime] = None,
    ) -> Optional[Estadia]:
        """Start a stay under a guest's reservation.

        Without ``checkin`` the stay starts at the system date. Returns None
        if the guest has no reservation with that code.
        """
        huesped = self.buscar_huesped(email_huesped)
        return huesped.alta_estadia(codigo_reserva, self.contexto, checkin)

    def finalizar_estadia(
        self,
        codigo_estadia: int,
        email_huesped: str,
        checkout: Optional[datetime] = None,
    ) -> None:
        """Close a guest's stay, at the system date unless ``checkout`` is given."""
        huesped = self.buscar_huesped(email_huesped)
        fin = checkout if checkout is not None else self.contexto.fecha_sistema
        huesped.finalizar_estadia(codigo_estadia, fin)

    def calificar_estadia(
        self,
        nombre_hostal: str,
        codigo_estadia: int,
        comentario: str,
        calificacion: int,
        email_huesped: str,
        fecha: Optional[datetime] = None,
    ) -> Review:
        """Review a hostel for one of a guest's stays."""
        hostal = self.buscar_hostal(nombre_hostal)
        huesped = self.buscar_huesped(email_huesped)
        return huesped.calificar_hostal(
            hostal, codigo_estadia, comentario, calificacion, self.contexto, fecha
        )

    def alta_respuesta(
        self,
        codigo_review: int,
        email_empleado: str,
        respuesta: str,
        fecha: Optional[datetime] = None,
    ) -> Optional[Respuesta]:
        """Reply as an employee to the review with this code.

        Returns the reply, or None if no guest has such a review.
        """
        empleado = self.buscar_empleado(email_empleado)
        creada = None
        for huesped in self.huespedes:
            resultado = huesped.alta_respuesta(codigo_review, empleado, respuesta, fecha)
            if resultado is not None:
                creada = resultado
        return creada

    def actualizar_estado_reservas(self) -> None:
        """Bring reservation states in line with the system date.

        A reservation nobody stayed in whose check-out has passed is
        cancelled. An individual reservation that was cancelled but whose
        check-out lies ahead again is reopened, or closed if it has stays.
        """
        for huesped in self.huespedes:
            for reserva in huesped.reservas_individuales:
                self._cancelar_si_vencida(reserva)
                if reserva.estado is Estado.CANCELADA:
                    if self.contexto.comparar_con_sistema(
                        reserva.checkout
                    ) is ComparacionFecha.MAYOR:
                        if reserva.cantidad_estadias() == 0:
                            reserva.estado = Estado.ABIERTA
                        else:
                            reserva.estado = Estado.CERRADA
            for reserva in huesped.reservas_grupales:
                self._cancelar_si_vencida(reserva)

    def _cancelar_si_vencida(self, reserva: Reserva) -> None:
        if (
            reserva.estado is not Estado.CANCELADA
            and reserva.cantidad_estadias() == 0
            and self.contexto.comparar_con_sistema(reserva.checkout)
            is ComparacionFecha.MENOR
        ):
            reserva.estado = Estado.CANCELADA

    # Checks

    def verificar_email(self, email: str) -> bool:
        """True if a guest or an employee uses this e-mail."""
        return self.huespedes.member(email) or self.empleados.member(email)

    def validar_email_huesped(self, email: str) -> bool:
        """True if a guest uses this e-mail."""
        return self.huespedes.member(email)

    def verificar_email_empleado(self, email: str) -> bool:
        """True if an employee uses this e-mail."""
        return self.empleados.member(email)

    def existe_hostal(self, nombre: str) -> None:
        """Raise ValueError if a hostel with this name exists."""
        if self.hostales.member(nombre):
            raise ValueError("Hostal ya existente!")

    def no_existe_hostal(self, nombre: str) -> None:
        """Raise ValueError if no hostel with this name exists."""
        if not self.hostales.member(nombre):
            raise ValueError("Hostal no existente!")

    def existe_hostal_bool(self, nombre: str) -> bool:
        """True if a hostel with this name exists."""
        return self.hostales.member(nombre)

    def tipo_usuario(self, email: str) -> int:
        """0 for a guest's e-mail, 1 for an employee's, -1 if unknown."""
        if self.huespedes.member(email):
            return 0
        if self.empleados.member(email):
            return 1
        return -1