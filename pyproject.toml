[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicas"
version = "1.0.0"
description = "Linked lists, a stack and small interactive console exercises built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "stack", "palindrome", "balanced brackets", "console"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicas-registro = "practicas.registro:main"
practicas-registro-doble = "practicas.registro_doble:main"
practicas-cadenas = "practicas.cadenas:main"

[tool.hatch.build.targets.wheel]
packages = ["practicas"]

[tool.pytest.ini_options]
addopts = "-ra"
