import logging
from typing import List

from app.models.student import Student
from app.repositories.student import StudentRepository

logger = logging.getLogger(__name__)

DEFAULT_STUDENT_NAME = "Kanojo"
DEFAULT_STUDENT_AGE = 20


def list_students(repo: StudentRepository) -> List[Student]:
    """Return every stored student"""
    students = repo.find_all()
    logger.debug("Listed %d students", len(students))
    return students


def add_student(repo: StudentRepository) -> Student:
    """
    Insert a new student with the default name and age.

    Every call creates a new record; there is no duplicate check.
    """
    student = Student(name=DEFAULT_STUDENT_NAME, age=DEFAULT_STUDENT_AGE)
    saved = repo.save(student)
    logger.info("Saved student id=%s", saved.id)
    return saved
