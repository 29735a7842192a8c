"""Student records: comparisons, formatting and interactive entry."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

from .captura import input_float, input_int, input_string

NAME_INPUT_LENGTH = 255


@dataclass
class Student:
    """One student record."""

    enrollment: int = 0
    name: str = ""
    semesters: int = 0
    average: float = 0.0


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_enrollment(a: Student, b: Student) -> int:
    """Order by enrollment number, ascending."""
    return _sign(a.enrollment, b.enrollment)


def compare_semesters(a: Student, b: Student) -> int:
    """Order by semesters, ascending."""
    return _sign(a.semesters, b.semesters)


def compare_average(a: Student, b: Student) -> int:
    """Order by average, ascending."""
    return _sign(a.average, b.average)


def compare_name(a: Student, b: Student) -> int:
    """Order by name, ascending."""
    return _sign(a.name, b.name)


def format_student(student: Student) -> str:
    """One-line form used when listing: ``name_enrollment_semesters_average``."""
    return f"{student.name}_{student.enrollment}_{student.semesters}_{student.average:.2f}"


def describe_student(student: Student) -> str:
    """Multi-line labelled description of a student."""
    return (
        f"Nombre: {student.name}\n"
        f"Matricula: {student.enrollment}\n"
        f"Semestres: {student.semesters}\n"
        f"Promedio: {student.average:.2f}\n"
    )


def read_student(
    students: Any,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Student:
    """Prompt for a new student, asking again while the enrollment is already in ``students``."""
    out = stdout if stdout is not None else sys.stdout
    name = input_string("Nombre>> ", NAME_INPUT_LENGTH, stdin, out)
    enrollment = input_int("Matricula>> ", stdin, out)
    while students.find(Student(enrollment=enrollment), compare_enrollment) is not None:
        enrollment = input_int("Matricula>> ", stdin, out)
    semesters = input_int("Semestres>> ", stdin, out)
    average = input_float("Promedio>> ", stdin, out)
    out.write("\n")
    return Student(enrollment=enrollment, name=name, semesters=semesters, average=average)