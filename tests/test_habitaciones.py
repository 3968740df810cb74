from dataclasses import dataclass, field
from datetime import datetime

from hostales.habitaciones import Habitacion
from hostales.reservas import Estado, ReservaGrupal, ReservaIndividual


@dataclass
class _Hostal:
    nombre: str


@dataclass(eq=False)
class _Huesped:
    nombre: str
    email: str
    es_tecno: bool = False
    reservas: list = field(default_factory=list)

    def asignar_reserva(self, reserva):
        self.reservas.append(reserva)

    def asignar_estadia(self, estadia):
        pass


IN = datetime(2023, 6, 10, 14, 0)
OUT = datetime(2023, 6, 12, 10, 0)


def _habitacion():
    return Habitacion(numero=4, precio=50.0, capacidad=3, hostal=_Hostal("Mar"))


def test_pertenece_a_hostal():
    habitacion = _habitacion()
    assert habitacion.pertenece_a_hostal("Mar") is True
    assert habitacion.pertenece_a_hostal("Sierra") is False


def test_room_without_hostel_belongs_nowhere():
    habitacion = Habitacion(numero=1, precio=10.0, capacidad=1)
    assert habitacion.pertenece_a_hostal("") is False


def test_new_room_has_no_reservations():
    habitacion = _habitacion()
    assert habitacion.reservas.is_empty()
    assert len(habitacion.estadias) == 0


def test_crear_reserva_individual_is_stored_by_code():
    habitacion = _habitacion()
    huesped = _Huesped("Ana", "ana@example.com")
    reserva = habitacion.crear_reserva_individual(5, huesped, IN, OUT)
    assert isinstance(reserva, ReservaIndividual)
    assert habitacion.reservas.find(5) is reserva
    assert reserva.estado is Estado.ABIERTA
    assert reserva.habitacion is habitacion
    assert huesped.reservas == [reserva]


def test_crear_reserva_grupal_is_stored_by_code():
    habitacion = _habitacion()
    huespedes = [_Huesped("Ana", "ana@example.com"), _Huesped("Bo", "bo@example.com")]
    reserva = habitacion.crear_reserva_grupal(9, huespedes, IN, OUT)
    assert isinstance(reserva, ReservaGrupal)
    assert habitacion.reservas.find(9) is reserva
    assert reserva.cantidad_huespedes == 2
    assert all(h.reservas == [reserva] for h in huespedes)


def test_several_reservations_kept_and_belong_to_hostel():
    habitacion = _habitacion()
    huesped = _Huesped("Ana", "ana@example.com")
    primera = habitacion.crear_reserva_individual(1, huesped, IN, OUT)
    segunda = habitacion.crear_reserva_individual(2, huesped, IN, OUT)
    assert len(habitacion.reservas) == 2
    assert set(habitacion.reservas) == {primera, segunda}
    assert all(r.pertenece_a_hostal("Mar") for r in habitacion.reservas)