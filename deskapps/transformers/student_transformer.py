"""Transformer between Student models and lines of the students file."""

from structlog import get_logger

from deskapps.models.student import Student
from deskapps.transformers.errors import RecordFormatError

logger = get_logger(__name__)


class StudentTransformer:
    """Encodes students as ``name,grade1,grade2,...``."""

    @staticmethod
    def to_line(student: Student) -> str:
        """Encode a student as one line (without newline).

        A student without grades is written with a trailing comma
        (``Ann,``).
        """
        grades = ",".join(str(float(grade)) for grade in student.grades)
        return f"{student.name},{grades}"

    @staticmethod
    def from_line(line: str) -> Student:
        """Decode one line of the students file.

        Grades that do not parse as numbers are dropped.

        Raises:
            RecordFormatError: If the name field is empty
        """
        name, *raw_grades = line.split(",")
        if not name.strip():
            raise RecordFormatError(line, "empty student name")

        grades: list[float] = []
        for raw in raw_grades:
            if not raw.strip():
                continue
            try:
                grades.append(float(raw))
            except ValueError:
                logger.debug("Skipping unparseable grade", student=name, value=raw)

        return Student(name=name, grades=grades)
