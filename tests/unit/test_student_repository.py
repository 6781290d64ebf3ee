"""Tests for the StudentRepository implementations.

Tests cover:
- SqlAlchemyStudentRepository against in-memory SQLite
- InMemoryStudentRepository id assignment and copy semantics
"""

from sqlalchemy.orm import Session

from app.models.student import Student
from app.repositories.student import (
    InMemoryStudentRepository,
    SqlAlchemyStudentRepository,
    StudentRepository,
)

# =============================================================================
# SqlAlchemyStudentRepository
# =============================================================================


def test_sqlalchemy_repository_implements_port(db_session: Session) -> None:
    assert isinstance(SqlAlchemyStudentRepository(db_session), StudentRepository)


def test_sqlalchemy_find_all_empty(db_session: Session) -> None:
    assert SqlAlchemyStudentRepository(db_session).find_all() == []


def test_sqlalchemy_save_assigns_id(db_session: Session) -> None:
    repo = SqlAlchemyStudentRepository(db_session)

    saved = repo.save(Student(name="Kanojo", age=20))

    assert saved.id is not None
    assert saved.name == "Kanojo"
    assert saved.age == 20


def test_sqlalchemy_save_is_visible_to_other_sessions(db_session: Session) -> None:
    from app.core.database import SessionLocal

    SqlAlchemyStudentRepository(db_session).save(Student(name="Kanojo", age=20))

    other = SessionLocal()
    try:
        students = SqlAlchemyStudentRepository(other).find_all()
    finally:
        other.close()

    assert [(s.name, s.age) for s in students] == [("Kanojo", 20)]


def test_sqlalchemy_find_all_returns_every_record(db_session: Session) -> None:
    repo = SqlAlchemyStudentRepository(db_session)
    for _ in range(3):
        repo.save(Student(name="Kanojo", age=20))

    students = repo.find_all()

    assert len(students) == 3
    assert len({s.id for s in students}) == 3


# =============================================================================
# InMemoryStudentRepository
# =============================================================================


def test_memory_ids_start_at_one(memory_repository: InMemoryStudentRepository) -> None:
    first = memory_repository.save(Student(name="Kanojo", age=20))
    second = memory_repository.save(Student(name="Kanojo", age=20))

    assert (first.id, second.id) == (1, 2)


def test_memory_find_all_keeps_insertion_order(memory_repository: InMemoryStudentRepository) -> None:
    memory_repository.save(Student(name="a", age=1))
    memory_repository.save(Student(name="b", age=2))

    assert [s.name for s in memory_repository.find_all()] == ["a", "b"]


def test_memory_find_all_returns_copies(memory_repository: InMemoryStudentRepository) -> None:
    memory_repository.save(Student(name="Kanojo", age=20))

    memory_repository.find_all()[0].age = 99

    assert memory_repository.find_all()[0].age == 20


def test_memory_save_detaches_caller_object(memory_repository: InMemoryStudentRepository) -> None:
    student = memory_repository.save(Student(name="Kanojo", age=20))

    student.name = "changed"

    assert memory_repository.find_all()[0].name == "Kanojo"


def test_memory_save_with_existing_id_updates(memory_repository: InMemoryStudentRepository) -> None:
    student = memory_repository.save(Student(name="Kanojo", age=20))
    student.age = 21

    memory_repository.save(student)

    students = memory_repository.find_all()
    assert len(students) == 1
    assert students[0].age == 21


def test_memory_save_with_unknown_id_inserts(memory_repository: InMemoryStudentRepository) -> None:
    memory_repository.save(Student(id=7, name="Kanojo", age=20))

    students = memory_repository.find_all()
    assert len(students) == 1
    assert students[0].id == 7


def test_memory_counter_skips_explicit_ids(memory_repository: InMemoryStudentRepository) -> None:
    memory_repository.save(Student(id=7, name="Kanojo", age=20))

    assigned = memory_repository.save(Student(name="Kanojo", age=20))

    assert assigned.id == 8
    assert sorted(s.id for s in memory_repository.find_all()) == [7, 8]
