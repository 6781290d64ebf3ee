from abc import ABC, abstractmethod
from typing import Dict, List

from sqlalchemy.orm import Session

from app.models.student import Student


class StudentRepository(ABC):
    """Port for student persistence.

    Contract:
    - find_all() returns every stored student in store-defined order
    - save() persists one student and returns it with its id assigned
    - Errors from the backing store propagate unchanged
    """

    @abstractmethod
    def find_all(self) -> List[Student]:
        """Return all stored students. No filtering, no paging."""

    @abstractmethod
    def save(self, student: Student) -> Student:
        """Persist a student, assigning a store-generated id if it has none."""


class SqlAlchemyStudentRepository(StudentRepository):
    """Student repository backed by a SQLAlchemy session.

    The session is owned by the caller; this class commits but never closes it.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_all(self) -> List[Student]:
        return self.db.query(Student).all()

    def save(self, student: Student) -> Student:
        self.db.add(student)
        self.db.commit()
        self.db.refresh(student)
        return student


class InMemoryStudentRepository(StudentRepository):
    """In-memory student repository for tests and local runs.

    Records are keyed by id. save() upserts: a student without an id gets
    the next counter value, a student with an id replaces or inserts the
    entry under that id and moves the counter past it. Both save() and
    find_all() hand out copies so callers cannot mutate stored state.
    """

    def __init__(self) -> None:
        self._students: Dict[int, Student] = {}
        self._next_id = 1

    def find_all(self) -> List[Student]:
        return [_copy(student) for student in self._students.values()]

    def save(self, student: Student) -> Student:
        if student.id is None:
            student.id = self._next_id
        self._next_id = max(self._next_id, student.id + 1)
        self._students[student.id] = _copy(student)
        return student


def _copy(student: Student) -> Student:
    return Student(id=student.id, name=student.name, age=student.age)
