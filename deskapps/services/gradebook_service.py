"""Student grade tracking."""

from pathlib import Path

from structlog import get_logger

from deskapps.models.student import Student
from deskapps.storage import FlatFileStore
from deskapps.transformers import StudentTransformer

logger = get_logger(__name__)

MIN_GRADE = 0.0
MAX_GRADE = 100.0


class GradebookError(Exception):
    """Raised when a gradebook operation is refused."""

    default_message = "Gradebook error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyStudentName(GradebookError):
    default_message = "Name cannot be empty."


class StudentAlreadyExists(GradebookError):
    default_message = "Student already exists."


class GradeOutOfRange(GradebookError):
    default_message = "Grade must be between 0 and 100."


class NoGrades(GradebookError):
    default_message = "No grades to remove."


class InvalidGradePosition(GradebookError):
    default_message = "Invalid index."


class GradebookService:
    """Students and their grades, saved to one file after every change.

    Student names are unique ignoring case.
    """

    def __init__(self, students: list[Student], store: FlatFileStore, path: Path):
        self.students = students
        self.store = store
        self.path = Path(path)

    @classmethod
    def load(cls, path: Path, store: FlatFileStore | None = None) -> "GradebookService":
        """Load the students file; a missing file gives an empty gradebook."""
        store = store or FlatFileStore()
        students = store.load(path, StudentTransformer.from_line)
        logger.info("Gradebook loaded", path=str(path), students=len(students))
        return cls(students, store, path)

    def save(self) -> None:
        """Rewrite the students file.

        Raises:
            StorageError: If the file cannot be written
        """
        self.store.save(self.path, self.students, StudentTransformer.to_line)

    def find(self, name: str) -> Student | None:
        name = name.strip()
        for student in self.students:
            if student.has_name(name):
                return student
        return None

    def add_student(self, name: str) -> Student:
        """Register a new student without grades.

        Raises:
            EmptyStudentName: If the name is blank
            StudentAlreadyExists: If the name is taken, ignoring case
        """
        name = name.strip()
        if not name:
            raise EmptyStudentName()
        if self.find(name) is not None:
            raise StudentAlreadyExists()

        student = Student(name=name)
        self.students.append(student)
        self.save()
        logger.info("Student added", student=name)
        return student

    def add_grade(self, student: Student, grade: float) -> None:
        """Append a grade.

        Raises:
            GradeOutOfRange: If grade is outside [0, 100]
        """
        if not MIN_GRADE <= grade <= MAX_GRADE:
            raise GradeOutOfRange()
        student.grades.append(grade)
        self.save()
        logger.info("Grade added", student=student.name, grade=grade)

    def remove_student(self, student: Student) -> None:
        self.students.remove(student)
        self.save()
        logger.info("Student removed", student=student.name)

    def remove_grade(self, student: Student, position: int) -> float:
        """Remove a grade by its 1-based position.

        Returns:
            The removed grade

        Raises:
            NoGrades: If the student has no grades
            InvalidGradePosition: If position is out of range
        """
        if not student.grades:
            raise NoGrades()
        if not 1 <= position <= len(student.grades):
            raise InvalidGradePosition()

        grade = student.grades.pop(position - 1)
        self.save()
        logger.info("Grade removed", student=student.name, grade=grade)
        return grade

    def summary(self) -> list[Student]:
        """Students sorted by average grade, highest first."""
        return sorted(self.students, key=lambda s: s.average, reverse=True)
