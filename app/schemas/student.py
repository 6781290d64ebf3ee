from typing import Optional
from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: Optional[str] = None
    age: Optional[int] = None


class Student(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
