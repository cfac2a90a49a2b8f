"""Interactive console for the student grade tracker."""

from structlog import get_logger

from deskapps.cli.prompts import (
    NO_COMMAS,
    InputFn,
    OutputFn,
    ask,
    has_field_delimiter,
    parse_float,
    parse_int,
)
from deskapps.models.student import Student
from deskapps.services import GradebookError, GradebookService
from deskapps.storage import StorageError

logger = get_logger(__name__).bind(app="grades")

MENU = (
    "\n=== Student Grade Tracker ===\n"
    "1. Add Student\n"
    "2. Add Grade to Student\n"
    "3. Remove Student\n"
    "4. Remove Grade from Student\n"
    "5. Search Student\n"
    "6. View Summary Report\n"
    "7. Exit"
)

EXIT_CHOICE = 7


class GradeMenu:
    """Numbered menu driving a GradebookService."""

    def __init__(
        self,
        gradebook: GradebookService,
        read: InputFn = input,
        write: OutputFn = print,
    ):
        self.gradebook = gradebook
        self.read = read
        self.write = write
        self.actions = {
            1: self.add_student,
            2: self.add_grade,
            3: self.remove_student,
            4: self.remove_grade,
            5: self.search_student,
            6: self.show_summary,
        }

    def run(self) -> int:
        """Loop until Exit or end of input, then save.

        Returns:
            Process exit code
        """
        logger.info("Grade tracker started")
        while True:
            self.write(MENU)
            try:
                raw_choice = ask(self.read, "Choose an option: ")
            except EOFError:
                break

            try:
                choice = parse_int(raw_choice)
            except ValueError:
                self.write("Invalid input. Please enter a number.")
                continue

            if choice == EXIT_CHOICE:
                break

            action = self.actions.get(choice)
            if action is None:
                self.write("Invalid option. Try again.")
                continue

            try:
                action()
            except EOFError:
                break
            except GradebookError as e:
                self.write(str(e))
            except StorageError as e:
                self.write(str(e))

        try:
            self.gradebook.save()
        except StorageError as e:
            self.write(str(e))
            return 1
        self.write("Exiting... Data saved.")
        logger.info("Grade tracker stopped")
        return 0

    def select_student(self) -> Student | None:
        """Let the user pick a student from a numbered list."""
        self.write("Select a student:")
        for number, student in enumerate(self.gradebook.students, start=1):
            self.write(f"{number}. {student.name}")
        try:
            number = parse_int(ask(self.read, "Enter student number: "))
        except ValueError:
            self.write("Invalid input.")
            return None
        if not 1 <= number <= len(self.gradebook.students):
            self.write("Invalid selection.")
            return None
        return self.gradebook.students[number - 1]

    def add_student(self) -> None:
        name = ask(self.read, "Enter student name: ")
        if has_field_delimiter(name):
            self.write(NO_COMMAS)
            return
        self.gradebook.add_student(name)
        self.write("Student added successfully.")

    def add_grade(self) -> None:
        if not self.gradebook.students:
            self.write("No students available. Add a student first.")
            return
        student = self.select_student()
        if student is None:
            return
        try:
            grade = parse_float(ask(self.read, "Enter grade (0-100): "))
        except ValueError:
            self.write("Invalid grade. Enter a number.")
            return
        self.gradebook.add_grade(student, grade)
        self.write("Grade added successfully.")

    def remove_student(self) -> None:
        if not self.gradebook.students:
            self.write("No students to remove.")
            return
        student = self.select_student()
        if student is None:
            return
        self.gradebook.remove_student(student)
        self.write("Student removed.")

    def remove_grade(self) -> None:
        student = self.select_student()
        if student is None or not student.grades:
            self.write("No grades to remove.")
            return
        self.write(f"Grades: {student.grades}")
        try:
            position = parse_int(ask(self.read, "Enter grade index to remove (1-based): "))
        except ValueError:
            self.write("Invalid index.")
            return
        self.gradebook.remove_grade(student, position)
        self.write("Grade removed.")

    def search_student(self) -> None:
        name = ask(self.read, "Enter student name to search: ")
        student = self.gradebook.find(name)
        if student is None:
            self.write("Student not found.")
            return
        self.write(student.render())

    def show_summary(self) -> None:
        if not self.gradebook.students:
            self.write("No students to display.")
            return
        self.write("\n=== Summary Report (Sorted by Average Descending) ===")
        for student in self.gradebook.summary():
            self.write(student.render())
