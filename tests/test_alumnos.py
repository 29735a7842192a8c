import io

import pytest

from practicas.alumnos import (
    Student,
    compare_average,
    compare_enrollment,
    compare_name,
    compare_semesters,
    describe_student,
    format_student,
    read_student,
)
from practicas.listadoble import DoublyLinkedList


@pytest.mark.parametrize(
    "compare, low, high",
    [
        (compare_enrollment, Student(enrollment=1), Student(enrollment=2)),
        (compare_semesters, Student(semesters=1), Student(semesters=8)),
        (compare_average, Student(average=6.5), Student(average=9.0)),
        (compare_name, Student(name="Ana"), Student(name="Beto")),
    ],
)
def test_comparisons_are_ascending_and_antisymmetric(compare, low, high):
    assert compare(low, high) < 0
    assert compare(high, low) > 0
    assert compare(low, low) == 0


def test_format_student():
    student = Student(enrollment=5, name="Ana", semesters=3, average=9.5)
    assert format_student(student) == "Ana_5_3_9.50"


def test_describe_student_lines():
    student = Student(enrollment=5, name="Ana", semesters=3, average=9.5)
    lines = describe_student(student).splitlines()
    assert lines[0] == "Nombre: Ana"
    assert lines[1] == "Matricula: 5"
    assert lines[2] == "Semestres: 3"
    assert lines[3].startswith("Promedio: 9.5")


def test_read_student_round_trip():
    students = DoublyLinkedList(compare_enrollment, format_student)
    out = io.StringIO()
    student = read_student(students, io.StringIO("Ana\n5\n3\n9.5\n"), out)
    assert student == Student(enrollment=5, name="Ana", semesters=3, average=9.5)
    assert out.getvalue().endswith("\n")


def test_read_student_asks_again_for_taken_enrollment():
    students = DoublyLinkedList(compare_enrollment, format_student)
    students.append(Student(enrollment=5, name="Beto"))
    out = io.StringIO()
    student = read_student(students, io.StringIO("Ana\n5\n7\n3\n9.5\n"), out)
    assert student.enrollment == 7
    assert out.getvalue().count("Matricula>> ") == 2


def test_read_student_end_of_input():
    students = DoublyLinkedList(compare_enrollment, format_student)
    with pytest.raises(EOFError):
        read_student(students, io.StringIO("Ana\n"), io.StringIO())