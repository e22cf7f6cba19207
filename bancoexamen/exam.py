"""An exam: a bounded, ordered collection of questions with unique statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from bancoexamen.questions import Question


class ExamError(Exception):
    """Base class for errors raised by an exam."""


class ExamFullError(ExamError):
    """The exam already holds as many questions as it allows."""


class DuplicateQuestionError(ExamError):
    """A question with the same statement is already in the exam."""


class QuestionNotFoundError(ExamError, LookupError):
    """No question with the requested id is in the exam."""


@dataclass
class Exam:
    name: str = ""
    subject: str = ""
    capacity: int = 0
    questions: list[Question] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def has_statement(self, statement: str) -> bool:
        """Whether a question with exactly this statement is already present."""
        return any(q.statement == statement for q in self.questions)

    def add_question(self, question: Question) -> None:
        """Append a question, refusing it when the exam is full or it is a duplicate."""
        if len(self.questions) >= self.capacity:
            raise ExamFullError(
                "No se puede agregar la pregunta: se ha alcanzado el límite del examen."
            )
        if self.has_statement(question.statement):
            raise DuplicateQuestionError(
                "La pregunta ya existe (enunciado duplicado). No se agregó."
            )
        self.questions.append(question)

    def _index_of(self, question_id: int) -> int:
        for index, question in enumerate(self.questions):
            if question.id == question_id:
                return index
        raise QuestionNotFoundError("Pregunta no encontrada.")

    def find_question(self, question_id: int) -> Question:
        return self.questions[self._index_of(question_id)]

    def replace_question(self, question_id: int, replacement: Question) -> Question:
        """Put a replacement in the place of the question with this id; return the old one."""
        index = self._index_of(question_id)
        previous = self.questions[index]
        self.questions[index] = replacement
        return previous

    def remove_question(self, question_id: int) -> Question:
        """Remove and return the question with this id."""
        return self.questions.pop(self._index_of(question_id))

    def filter_by_bloom(self, level: int) -> list[Question]:
        return [q for q in self.questions if q.bloom_level == level]

    def total_time(self) -> int:
        return sum(q.estimated_time for q in self.questions)

    def summary(self) -> str:
        return "\n".join(
            [
                "=== INFORMACIÓN DEL EXAMEN ===",
                f"Nombre: {self.name}",
                f"Asignatura: {self.subject}",
                f"Cantidad de preguntas: {len(self.questions)}/{self.capacity}",
                f"Tiempo total: {self.total_time()} minutos",
            ]
        )

    def listing(self) -> str:
        lines = [f"=== PREGUNTAS DEL EXAMEN: {self.name} ==="]
        for question in self.questions:
            lines.extend(["", f"Pregunta {question.id}:", f"Enunciado: {question.statement}"])
        return "\n".join(lines)