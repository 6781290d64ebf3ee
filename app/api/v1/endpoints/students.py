from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.deps import get_student_repository
from app.repositories.student import StudentRepository
from app.services.student import student as crud_student
from app.schemas.student import Student

router = APIRouter()


@router.api_route("/getStudents", methods=["GET", "POST"], response_model=List[Student])
def get_students(repo: StudentRepository = Depends(get_student_repository)):
    """
    Return every stored student, in the order the store yields them
    """
    return crud_student.list_students(repo)


@router.api_route(
    "/addStudent",
    methods=["GET", "POST"],
    status_code=status.HTTP_200_OK,
    response_class=Response,
)
def add_student(repo: StudentRepository = Depends(get_student_repository)):
    """
    Insert a student named "Kanojo", aged 20

    Takes no input. Each call adds another identical record.
    """
    crud_student.add_student(repo)
    return Response(status_code=status.HTTP_200_OK)
