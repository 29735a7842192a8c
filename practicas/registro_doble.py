"""Student register menu backed by a doubly linked list kept in enrollment order."""

from __future__ import annotations

import sys
from typing import TextIO

from .alumnos import (
    NAME_INPUT_LENGTH,
    Student,
    compare_average,
    compare_enrollment,
    compare_name,
    compare_semesters,
    describe_student,
    format_student,
    read_student,
)
from .captura import input_float, input_int, input_string
from .listadoble import DoublyLinkedList

_MENU = (
    "\n               --MENU--\n"
    "[1] Registrar Alumno [4] Buscar Alumno\n"
    "[2] Reordenar        [5] Borar Alumno\n"
    "[3] Mostrar Alumnos  [6] Terminar Programa\n"
)


def _reorder(students: DoublyLinkedList, stdin: TextIO, out: TextIO) -> None:
    out.write("Modos de ordenar\n[1] Nombre    [3] Matricula\n[2] Semestres [4] Promedio\n")
    option = input_int("Ingrese una opcion>> ", stdin, out)
    orders = {1: compare_name, 2: compare_semesters, 3: compare_enrollment, 4: compare_average}
    compare = orders.get(option)
    if compare is None:
        out.write("Opcion invalida...\n")
    else:
        students.reorder(compare)


def _show(students: DoublyLinkedList, stdin: TextIO, out: TextIO) -> None:
    while True:
        try:
            option = input_int(
                "Como quiere mostrar los datos?\n[1] Ascendente [0] Descendente\n>> ", stdin, out
            )
        except ValueError:
            continue
        if option in (0, 1):
            break
    students.show(option != 0, out)


def _search(students: DoublyLinkedList, stdin: TextIO, out: TextIO) -> None:
    out.write("Que dato quiere buscar?\n[1] Nombre   [3] Matricula\n[2] Promedio [4] Semestres\n")
    option = input_int("Ingrese una opcion>> ", stdin, out)
    if option == 1:
        probe = Student(name=input_string("Ingresa el nombre>> ", NAME_INPUT_LENGTH, stdin, out))
        compare = compare_name
    elif option == 2:
        probe = Student(average=input_float("Ingrese el promedio del alumno>> ", stdin, out))
        compare = compare_average
    elif option == 3:
        probe = Student(enrollment=input_int("Ingrese la matricula del alumno>> ", stdin, out))
        compare = compare_enrollment
    elif option == 4:
        probe = Student(semesters=input_int("Ingrese los semestres del alumno>> ", stdin, out))
        compare = compare_semesters
    else:
        out.write("Opcion invalida...\n")
        return
    found = students.find(probe, compare)
    if found is None:
        out.write("No se encontro ninguna alumno\n")
    else:
        out.write("Se ha encontrado un alumno>>\n" + describe_student(found))


def _delete(students: DoublyLinkedList, stdin: TextIO, out: TextIO) -> None:
    probe = Student(enrollment=input_int("Ingrese la matricula del alumno>> ", stdin, out))
    if students.find(probe, compare_enrollment) is None:
        out.write(f"No se encontro algun alumno con la matricula {probe.enrollment}\n")
    else:
        students.remove(probe, compare_enrollment)
        out.write("Alumno eliminado exitosamente\n")


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the register menu until the user quits or input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    students = DoublyLinkedList(compare_enrollment, format_student)
    while True:
        out.write(_MENU)
        try:
            option = input_int("Ingresa una opcion>> ", stdin, out)
            if option == 1:
                students.insert_sorted(read_student(students, stdin, out))
                students.reorder(compare_enrollment)
            elif option == 2:
                _reorder(students, stdin, out)
            elif option == 3:
                _show(students, stdin, out)
            elif option == 4:
                _search(students, stdin, out)
                # A search always goes on to the delete prompt.
                _delete(students, stdin, out)
            elif option == 5:
                _delete(students, stdin, out)
            elif option == 6:
                out.write("Finalizando programa...\n")
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