"""Test doubles for the interactive collaborators."""

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class ScriptedInput:
    """Stands in for input(): returns queued answers, then raises EOFError."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class Recorder:
    """Stands in for print(): collects everything written."""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ConfirmStub:
    """Payment confirmation returning a fixed answer and recording its calls."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.calls: list[tuple[float, int]] = []

    def __call__(self, total_price: float, nights: int) -> bool:
        self.calls.append((total_price, nights))
        return self.answer
