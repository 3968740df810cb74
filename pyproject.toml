[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hostales"
version = "0.1.0"
description = "In-memory hostel management: hostels, rooms, guests, employees, bookings, stays and reviews"
requires-python = ">=3.10"
dependencies = []
keywords = ["hostel", "booking", "reservations", "reviews", "hospitality"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hostales"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
