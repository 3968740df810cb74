from dataclasses import dataclass, field
from datetime import datetime

import pytest

from hostales.fechas import Contexto
from hostales.habitaciones import Habitacion
from hostales.reservas import Estado, Reserva, ReservaGrupal, ReservaIndividual


@dataclass
class _Hostal:
    nombre: str


@dataclass(eq=False)
class _Huesped:
    nombre: str
    email: str
    es_tecno: bool = False
    reservas: list = field(default_factory=list)
    estadias: list = field(default_factory=list)

    def asignar_reserva(self, reserva):
        self.reservas.append(reserva)

    def asignar_estadia(self, estadia):
        self.estadias.append(estadia)


IN = datetime(2023, 5, 1, 12, 0, 0)
OUT = datetime(2023, 5, 3, 12, 0, 0)


@pytest.fixture
def habitacion():
    return Habitacion(numero=1, precio=100.0, capacidad=2, hostal=_Hostal("Sol"))


def test_individual_registers_with_guest(habitacion):
    huesped = _Huesped("Ana", "ana@example.com")
    reserva = ReservaIndividual(7, IN, OUT, Estado.ABIERTA, habitacion, huesped)
    assert huesped.reservas == [reserva]
    assert reserva.codigo == 7
    assert reserva.estado is Estado.ABIERTA
    assert reserva.tipo is False
    assert reserva.nombre_huesped == "Ana"


def test_individual_cost(habitacion):
    reserva = ReservaIndividual(
        1, IN, OUT, Estado.ABIERTA, habitacion, _Huesped("Ana", "ana@example.com")
    )
    assert reserva.costo == pytest.approx(200.0)


def test_group_registers_every_guest_and_orders_by_email(habitacion):
    b = _Huesped("Bea", "bea@example.com")
    a = _Huesped("Ana", "ana@example.com")
    reserva = ReservaGrupal(3, IN, OUT, Estado.ABIERTA, habitacion, [b, a])
    assert list(reserva.huespedes) == [a, b]
    assert a.reservas == [reserva] and b.reservas == [reserva]
    assert reserva.cantidad_huespedes == 2
    assert reserva.tipo is True
    assert reserva.grupal is True


def test_group_cost_scales_with_guests(habitacion):
    uno = ReservaGrupal(
        1, IN, OUT, Estado.ABIERTA, habitacion, [_Huesped("A", "a@example.com")]
    )
    dos = ReservaGrupal(
        2,
        IN,
        OUT,
        Estado.ABIERTA,
        habitacion,
        [_Huesped("A", "a@example.com"), _Huesped("B", "b@example.com")],
    )
    assert dos.costo == pytest.approx(uno.costo * 2)
    assert dos.costo == pytest.approx(400.0)


def test_group_cost_has_no_tecno_discount(habitacion):
    normales = [_Huesped("A", "a@example.com"), _Huesped("B", "b@example.com")]
    tecnos = [
        _Huesped("C", "c@example.com", es_tecno=True),
        _Huesped("D", "d@example.com", es_tecno=True),
    ]
    r1 = ReservaGrupal(1, IN, OUT, Estado.ABIERTA, habitacion, normales)
    r2 = ReservaGrupal(2, IN, OUT, Estado.ABIERTA, habitacion, tecnos)
    assert r1.costo == r2.costo


def test_pertenece_a_hostal(habitacion):
    reserva = Reserva(1, IN, OUT, Estado.ABIERTA, habitacion)
    assert reserva.pertenece_a_hostal("Sol") is True
    assert reserva.pertenece_a_hostal("Luna") is False


def test_alta_estadia_with_checkin_closes_reservation(habitacion):
    huesped = _Huesped("Ana", "ana@example.com")
    reserva = ReservaIndividual(1, IN, OUT, Estado.ABIERTA, habitacion, huesped)
    contexto = Contexto(fecha_sistema=datetime(2023, 4, 1))
    estadia = reserva.alta_estadia(huesped, contexto, IN)
    assert reserva.estado is Estado.CERRADA
    assert reserva.cantidad_estadias() == 1
    assert estadia.checkin == IN
    assert estadia.codigo == 1
    assert contexto.contador_estadia == 2
    assert huesped.estadias == [estadia]
    assert estadia.habitacion is habitacion


def test_alta_estadia_defaults_to_system_date(habitacion):
    huesped = _Huesped("Ana", "ana@example.com")
    reserva = Reserva(1, IN, OUT, Estado.ABIERTA, habitacion)
    fecha = datetime(2023, 5, 2, 9, 30)
    estadia = reserva.alta_estadia(huesped, Contexto(fecha_sistema=fecha))
    assert estadia.checkin == fecha
    assert reserva.cantidad_estadias() == 1


def test_dates_drop_microseconds(habitacion):
    reserva = Reserva(
        1, IN.replace(microsecond=999), OUT.replace(microsecond=5), Estado.ABIERTA, habitacion
    )
    assert reserva.checkin == IN
    assert reserva.checkout == OUT


def test_new_reservation_has_no_stays(habitacion):
    reserva = Reserva(1, IN, OUT, Estado.CANCELADA, habitacion)
    assert reserva.cantidad_estadias() == 0
    assert reserva.estado == 2