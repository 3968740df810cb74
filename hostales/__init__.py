"""In-memory management of hostels, rooms, guests, employees, bookings, stays and reviews."""

__version__ = "0.1.0"