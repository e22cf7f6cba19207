"""Exam questions: the shared record, its three kinds and their descriptions."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

_BLOOM_NAMES = (
    "Recordar",
    "Comprender",
    "Aplicar",
    "Analizar",
    "Evaluar",
    "Crear",
)

_id_counter = itertools.count(1)


def _next_id() -> int:
    return next(_id_counter)


def bloom_name(level: int) -> str:
    """Name of a Bloom taxonomy level (0-5), or "No definido" outside that range."""
    if 0 <= level < len(_BLOOM_NAMES):
        return _BLOOM_NAMES[level]
    return "No definido"


class QuestionKind(Enum):
    """The kinds of question, valued by the one-letter code used in files."""

    TRUE_FALSE = "V"
    MULTIPLE_CHOICE = "M"
    SHORT_ANSWER = "R"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    QuestionKind.TRUE_FALSE: "Verdadero o Falso",
    QuestionKind.MULTIPLE_CHOICE: "Selección Múltiple",
    QuestionKind.SHORT_ANSWER: "Respuesta Corta",
}


@dataclass
class Question:
    """A question in an exam. Each new question gets the next free id."""

    bloom_level: int = 0
    estimated_time: int = 0
    statement: str = ""
    solution: str = ""
    score: int = 0
    id: int = field(default_factory=_next_id, kw_only=True)

    kind: ClassVar[QuestionKind | None] = None

    @property
    def code(self) -> str:
        """One-letter kind code, empty for a question of no particular kind."""
        return self.kind.value if self.kind is not None else ""

    def describe(self) -> str:
        """Multi-line description of the question."""
        lines = []
        if self.kind is not None:
            lines.append(f"Tipo: {self.kind.label}")
        lines.extend(
            [
                f"ID: {self.id}",
                f"Nivel Bloom: {self.bloom_level}. {bloom_name(self.bloom_level)}",
                f"Tiempo estimado: {self.estimated_time} minutos",
                f"Enunciado: {self.statement}",
                f"Solución: {self.solution}",
                f"Puntaje: {self.score} puntos",
            ]
        )
        return "\n".join(lines)


@dataclass
class TrueFalseQuestion(Question):
    kind: ClassVar[QuestionKind | None] = QuestionKind.TRUE_FALSE


@dataclass
class MultipleChoiceQuestion(Question):
    kind: ClassVar[QuestionKind | None] = QuestionKind.MULTIPLE_CHOICE


@dataclass
class ShortAnswerQuestion(Question):
    kind: ClassVar[QuestionKind | None] = QuestionKind.SHORT_ANSWER


_CLASSES = {
    QuestionKind.TRUE_FALSE: TrueFalseQuestion,
    QuestionKind.MULTIPLE_CHOICE: MultipleChoiceQuestion,
    QuestionKind.SHORT_ANSWER: ShortAnswerQuestion,
}


def create_question(
    kind: QuestionKind | str,
    bloom_level: int,
    estimated_time: int,
    statement: str,
    solution: str,
    score: int,
) -> Question:
    """Build a question of the given kind (a QuestionKind or its code letter)."""
    try:
        resolved = kind if isinstance(kind, QuestionKind) else QuestionKind(kind)
    except ValueError:
        raise ValueError(f"unknown question kind: {kind!r}") from None
    return _CLASSES[resolved](bloom_level, estimated_time, statement, solution, score)