"""Student register menu backed by a singly linked list."""

from __future__ import annotations

import sys
from typing import TextIO

from .alumnos import (
    Student,
    compare_enrollment,
    compare_name,
    describe_student,
    format_student,
)
from .captura import input_float, input_int, input_string
from .lista import LinkedList

NAME_LENGTH = 64

_MENU = (
    "\n            ----MENU----\n"
    "[1] Registrar Alumno  [4] Buscar Alumno\n"
    "[2] Desplegar Alumnos [5] Borrar Alumno\n"
    "[3] Reordenar         [6] Salir\n"
    "Selecciona una opcion\n"
)
_FIELDS = "[1] Nombre   [3] Matricula\n[2] Promedio [4] Semestres\n"


def compare_semesters_desc(a: Student, b: Student) -> int:
    """Order by semesters, descending."""
    return (a.semesters < b.semesters) - (a.semesters > b.semesters)


def compare_average_desc(a: Student, b: Student) -> int:
    """Order by average, descending."""
    return (a.average < b.average) - (a.average > b.average)


def _read_student(students: LinkedList, stdin: TextIO, out: TextIO) -> Student:
    name = input_string("Nombre>> ", NAME_LENGTH, stdin, out)
    enrollment = input_int("Matricula>> ", stdin, out)
    while students.find(Student(enrollment=enrollment), compare_enrollment) is not None:
        enrollment = input_int("Matricula>> ", stdin, out)
    semesters = input_int("Semestres>> ", stdin, out)
    average = input_float("Promedio>> ", stdin, out)
    return Student(enrollment=enrollment, name=name, semesters=semesters, average=average)


def _reorder(students: LinkedList, stdin: TextIO, out: TextIO) -> None:
    out.write("Como quiere reordenar?\n" + _FIELDS)
    option = input_int("Ingrese una opcion>> ", stdin, out)
    orders = {
        1: compare_name,
        2: compare_average_desc,
        3: compare_enrollment,
        4: compare_semesters_desc,
    }
    compare = orders.get(option)
    if compare is None:
        out.write("Opcion Invalida...\n")
    else:
        students.reorder(compare)


def _search(students: LinkedList, stdin: TextIO, out: TextIO) -> None:
    out.write("Que dato quiere buscar?\n" + _FIELDS)
    option = input_int("Ingrese una opcion>> ", stdin, out)
    if option == 1:
        probe = Student(name=input_string("Ingrese el nombre del alumno>> ", NAME_LENGTH, stdin, out))
        compare = compare_name
    elif option == 2:
        probe = Student(average=input_float("Ingrese el promedio del alumno>> ", stdin, out))
        compare = compare_average_desc
    elif option == 3:
        probe = Student(enrollment=input_int("Ingrese la matricula del alumno>> ", stdin, out))
        compare = compare_enrollment
    elif option == 4:
        probe = Student(semesters=input_int("Ingrese los semestres del alumno>> ", stdin, out))
        compare = compare_semesters_desc
    else:
        out.write("Opcion Invalida...\n")
        return
    found = students.find(probe, compare)
    if found is None:
        out.write("No se encontro ninguna alumno\n")
    else:
        out.write("Se ha encontrado un alumno>>\n" + describe_student(found))


def _delete(students: LinkedList, stdin: TextIO, out: TextIO) -> None:
    probe = Student(enrollment=input_int("Ingrese la matricula del alumno a eliminar>> ", stdin, out))
    if students.find(probe, compare_enrollment) is None:
        out.write(f"No se encontro algun alumno con la matricula {probe.enrollment}\n")
    else:
        students.remove(probe, compare_enrollment)
        out.write("Alumno eliminador exitosamente\n")


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the register menu until the user quits or input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    students = LinkedList(compare_name, format_student)
    while True:
        out.write(_MENU)
        try:
            option = input_int("", stdin, out)
            if option == 1:
                students.append(_read_student(students, stdin, out))
            elif option == 2:
                students.show(out)
            elif option == 3:
                _reorder(students, stdin, out)
            elif option == 4:
                _search(students, stdin, out)
            elif option == 5:
                _delete(students, stdin, out)
            elif option == 6:
                out.write("Terminando Programa...\n")
                return 0
            else:
                out.write("Opcion invalida...\n")
        except ValueError:
            out.write("Opcion invalida...\n")
        except EOFError:
            return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    return run()