from datetime import datetime

import pytest

from hostales.disponibilidad import (
    obtener_capacidad_habitacion,
    obtener_habitaciones_grupales,
    obtener_habitaciones_individuales,
    obtener_top_3_hostales,
)
from hostales.fechas import Contexto
from hostales.sistema import Sistema

ENE_10 = datetime(2024, 1, 10)
ENE_15 = datetime(2024, 1, 15)
ENE_20 = datetime(2024, 1, 20)
ENE_25 = datetime(2024, 1, 25)


@pytest.fixture
def sistema():
    s = Sistema(Contexto(fecha_sistema=datetime(2024, 1, 1)))
    s.alta_hostal("Sol", "Calle Uno", "100")
    s.alta_habitacion("Sol", 1, 100.0, 1)
    s.alta_habitacion("Sol", 2, 150.0, 3)
    s.alta_habitacion("Sol", 3, 80.0, 0)
    s.alta_huesped("Ana", "ana@example.com", "password", False)
    s.alta_huesped("Beto", "beto@example.com", "password", True)
    return s


def numeros(habitaciones):
    return [h.numero for h in habitaciones]


def test_individuales_without_reservations_offers_every_room(sistema):
    result = numeros(obtener_habitaciones_individuales(sistema, "Sol", ENE_10, ENE_15))
    assert sorted(result) == [1, 2, 3]


def test_individuales_in_room_order(sistema):
    result = numeros(obtener_habitaciones_individuales(sistema, "Sol", ENE_10, ENE_15))
    assert result == sorted(result, reverse=True)


def test_individuales_excludes_overlapping_reservation(sistema):
    sistema.alta_reserva_individual("Sol", 1, "ana@example.com", ENE_10, ENE_20)
    result = numeros(obtener_habitaciones_individuales(sistema, "Sol", ENE_15, ENE_25))
    assert 1 not in result
    assert 2 in result


def test_individuales_adjacent_range_is_free(sistema):
    sistema.alta_reserva_individual("Sol", 1, "ana@example.com", ENE_10, ENE_15)
    result = numeros(obtener_habitaciones_individuales(sistema, "Sol", ENE_15, ENE_20))
    assert 1 in result


def test_individuales_zero_capacity_with_reservation_excluded(sistema):
    sistema.alta_reserva_individual("Sol", 3, "ana@example.com", ENE_10, ENE_15)
    result = numeros(obtener_habitaciones_individuales(sistema, "Sol", ENE_20, ENE_25))
    assert 3 not in result


def test_grupales_only_rooms_for_several(sistema):
    result = numeros(obtener_habitaciones_grupales(sistema, "Sol", ENE_10, ENE_15))
    assert result == [2]


def test_grupales_excludes_overlap(sistema):
    sistema.alta_reserva_grupal(
        "Sol", 2, ["ana@example.com", "beto@example.com"], ENE_10, ENE_20
    )
    assert obtener_habitaciones_grupales(sistema, "Sol", ENE_15, ENE_25) == []
    result = numeros(obtener_habitaciones_grupales(sistema, "Sol", ENE_20, ENE_25))
    assert result == [2]


def test_unknown_hostel_raises(sistema):
    with pytest.raises(KeyError):
        obtener_habitaciones_individuales(sistema, "Luna", ENE_10, ENE_15)


def test_capacidad(sistema):
    assert obtener_capacidad_habitacion(sistema, 2, "Sol") == 3
    assert obtener_capacidad_habitacion(sistema, 1, "Sol") == 1


def test_capacidad_missing_room(sistema):
    with pytest.raises(KeyError):
        obtener_capacidad_habitacion(sistema, 99, "Sol")


def test_top_3_empty_system():
    assert obtener_top_3_hostales(Sistema(Contexto(fecha_sistema=ENE_10))) == []


def test_top_3_orders_by_average():
    s = Sistema(Contexto(fecha_sistema=ENE_10))
    for nombre, promedio in [("A", 2.0), ("B", 5.0), ("C", 1.0), ("D", 4.0)]:
        s.alta_hostal(nombre, "dir", "100").promedio_inicial = promedio
    top = obtener_top_3_hostales(s)
    assert [h.nombre for h in top] == ["B", "D", "A"]


def test_top_3_tie_goes_to_last_name():
    s = Sistema(Contexto(fecha_sistema=ENE_10))
    for nombre in ["A", "B", "C"]:
        s.alta_hostal(nombre, "dir", "100").promedio_inicial = 3.0
    assert [h.nombre for h in obtener_top_3_hostales(s)] == ["C", "B", "A"]


def test_top_3_fills_missing_places_with_empty_hostel():
    s = Sistema(Contexto(fecha_sistema=ENE_10))
    s.alta_hostal("A", "dir", "100").promedio_inicial = 3.0
    s.alta_hostal("B", "dir", "100").promedio_inicial = 4.0
    top = obtener_top_3_hostales(s)
    assert len(top) == 3
    assert [h.nombre for h in top[:2]] == ["B", "A"]
    assert top[2].nombre == ""
    assert top[2] is not s.buscar_hostal("A")