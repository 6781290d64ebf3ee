from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    age = Column(Integer)

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, name={self.name!r}, age={self.age!r})"
