from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.repositories.student import SqlAlchemyStudentRepository, StudentRepository


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    """
    Dependency providing the student repository for the current request.
    The session is closed by get_db once the request completes.
    """
    return SqlAlchemyStudentRepository(db)
