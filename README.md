# hostales

An in-memory domain model for a network of hostels. It keeps hostels,
rooms, guests and employees. It handles bookings, stays, reviews and the
replies employees write to those reviews.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Overview

### The system

`hostales.sistema.Sistema` is the entry point. It holds hostels by name,
and guests and employees by e-mail. Its `contexto` (a
`hostales.fechas.Contexto`) holds the system date and the counters that
hand out booking, stay and review codes. The system date starts at the
current time. You can read it or set it through `Sistema.fecha_sistema`.

- Registration:
  - `alta_hostal(nombre, direccion, telefono)`
  - `alta_huesped(nombre, email, contrasena, es_tecno)`
  - `alta_empleado(nombre, email, contrasena, cargo)`
  - `alta_habitacion(nombre_hostal, numero, precio, capacidad)`, which
    raises `ValueError` if the room number is already used in that hostel.
- `asignar_empleado_hostal(nombre_hostal, email_empleado, cargo)` gives an
  employee a position at a hostel.
- Bookings: `alta_reserva_individual` and `alta_reserva_grupal`. A group
  booking takes a list of guest e-mails.
- Stays:
  - `alta_estadia(codigo_reserva, email_huesped, checkin=None)` starts a
    stay and closes the booking.
  - `finalizar_estadia(codigo_estadia, email_huesped, checkout=None)` ends
    it.
  - If no date is given, the system date is used.
- Reviews:
  - `calificar_estadia(...)` lets a guest rate a stay.
  - `alta_respuesta(codigo_review, email_empleado, respuesta, fecha=None)`
    lets an employee reply to a review.
- `actualizar_estado_reservas()` checks bookings against the system date:
  - A booking whose check-out has passed and that nobody stayed in is
    cancelled.
  - A cancelled individual booking whose check-out lies ahead again is
    reopened. If it has stays, it is closed instead.
- Checks:
  - `verificar_email`, `validar_email_huesped`, `verificar_email_empleado`
    and `existe_hostal_bool` return booleans.
  - `existe_hostal` and `no_existe_hostal` raise `ValueError`.
  - `tipo_usuario` returns 0 for a guest, 1 for an employee and -1 for an
    unknown e-mail.
- Lookups: `buscar_hostal`, `buscar_huesped` and `buscar_empleado` raise
  `KeyError` when nothing matches.

### Queries

`hostales.disponibilidad` contains:

- `obtener_habitaciones_individuales` and `obtener_habitaciones_grupales`
  list the rooms that are free between two dates. Group queries only
  offer rooms for more than one guest.
- `obtener_capacidad_habitacion` returns a room's capacity.
- `obtener_top_3_hostales` returns the three best-rated hostels, first
  place first. If there are fewer than three hostels, an empty hostel
  fills each remaining place.

`hostales.consultas` holds read-only listings:

- `obtener_hostales`, `obtener_usuarios`, `obtener_huespedes`,
  `obtener_empleados` and `obtener_no_empleados_hostal`
- a guest's bookings (`obtener_reserva_usuario`) and a hostel's bookings
  (`obtener_reservas_hostal`)
- open and finished stays (`existe_estadia`,
  `obtener_estadias_fin_huesped`, `contar_estadias_activas`)
- unanswered reviews at an employee's hostel
  (`listar_comentarios_sin_responder`)

### Building blocks

The model types live in these modules:

- `hostales.hostal.Hostal`
- `hostales.habitaciones.Habitacion`
- `hostales.huespedes.Huesped`
- `hostales.usuarios.Empleado`
- `hostales.reservas`: `Reserva`, `ReservaIndividual`, `ReservaGrupal` and
  the `Estado` enum
- `hostales.estadias`: `Estadia` and `Review`
- `hostales.respuestas.Respuesta`

`hostales.diccionario.OrderedDictionary` is the ordered key/value store
used throughout. Its key types, `IntegerKey` and `StringKey`, are in
`hostales.claves`. `hostales.fechas` compares dates to the second and
checks whether two date ranges overlap.

## Example

```python
from datetime import datetime

from hostales.sistema import Sistema
from hostales.disponibilidad import obtener_habitaciones_individuales

password = "password"

sistema = Sistema()
sistema.alta_hostal("La Posada", "Calle 1", "000")
sistema.alta_habitacion("La Posada", 1, 50.0, 2)
sistema.alta_huesped("Ana", "ana@example.com", password, False)

checkin = datetime(2030, 1, 10)
checkout = datetime(2030, 1, 12)
libres = obtener_habitaciones_individuales(sistema, "La Posada", checkin, checkout)
reserva = sistema.alta_reserva_individual(
    "La Posada", 1, "ana@example.com", checkin, checkout
)
print(reserva.codigo, reserva.costo)
```

## What this package does not do

The package is a library only:

- It has no command-line program or interactive menu.
- It has no storage. Everything lives in memory and is lost when the
  process ends.
- It does not hash or check passwords. They are kept as given.