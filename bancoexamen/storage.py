"""Reading and writing exams as plain-text files of seven-line question blocks."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from bancoexamen.exam import Exam, ExamError
from bancoexamen.questions import Question, QuestionKind, create_question

logger = logging.getLogger(__name__)

HEADER = "Preguntas"
FILE_PREFIX = "Examen_"
FILE_SUFFIX = ".txt"
MAX_FILES = 100

LOADED_NAME = "Examen TXT"
LOADED_SUBJECT = "Asignatura TXT"
LOADED_CAPACITY = 100

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def extract_digits(text: str) -> str:
    """Keep only the ASCII digits of a string, in order."""
    return "".join(c for c in text if c in _DIGITS)


def exam_filename(exam_name: str) -> str:
    """File name for an exam: spaces become underscores, with prefix and suffix."""
    return f"{FILE_PREFIX}{exam_name.replace(' ', '_')}{FILE_SUFFIX}"


def _format_question(question: Question) -> str:
    return "\n".join(
        [
            f'"enunciado": "{question.statement}",',
            f'"id":{question.id},',
            f'"nivelBloom":{question.bloom_level},',
            f'"puntaje":{question.score},',
            f'"solucion": "{question.solution}",',
            f'"tiempoEstimado":{question.estimated_time},',
            f'"tipo": "{question.code}"',
        ]
    )


def format_exam(exam: Exam) -> str:
    """Render an exam's questions in the text file format."""
    parts = [f"{HEADER}\n\n"]
    parts.extend(f"{_format_question(q)}\n\n" for q in exam)
    return "".join(parts)


def _value_after_colon(line: str) -> str | None:
    _, colon, rest = line.partition(":")
    return _trim(rest) if colon else None


def _quoted_value(line: str, allow_comma: bool = True) -> str:
    value = _value_after_colon(line)
    if value is None:
        return ""
    if value.startswith('"'):
        value = value[1:]
    if allow_comma:
        if value.endswith(","):
            value = value[:-1]
        value = _trim(value)
    if value.endswith('"'):
        value = value[:-1]
    return value


def _number_value(line: str, field_name: str) -> int:
    value = _value_after_colon(line)
    if value is None:
        return 0
    digits = extract_digits(value)
    if not digits:
        logger.warning(
            "Error al convertir el campo '%s', valor no numérico: %s", field_name, value
        )
        return 0
    return int(digits)


def _lines(text: str) -> Iterator[str]:
    if not text:
        return iter(())
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return iter(pieces)


def parse_exam(text: str) -> Exam:
    """Build an exam from file text.

    Lines up to the one containing the header are skipped. Blocks with an
    unknown kind, a duplicate statement, or beyond the exam's capacity are
    left out; a block cut short by the end of the text is dropped.
    """
    exam = Exam(LOADED_NAME, LOADED_SUBJECT, LOADED_CAPACITY)
    lines = _lines(text)

    for line in lines:
        if HEADER in line:
            break

    for line in lines:
        if not _trim(line):
            continue
        statement = _quoted_value(line)
        rest = [next(lines, None) for _ in range(6)]
        if any(item is None for item in rest):
            break
        id_line, bloom_line, score_line, solution_line, time_line, kind_line = rest

        question_id = _number_value(id_line, "id")
        bloom_level = _number_value(bloom_line, "nivelBloom")
        score = _number_value(score_line, "puntaje")
        solution = _quoted_value(solution_line)
        estimated_time = _number_value(time_line, "tiempoEstimado")
        code = _quoted_value(kind_line, allow_comma=False)

        try:
            kind = QuestionKind(code)
        except ValueError:
            continue

        question = create_question(
            kind, bloom_level, estimated_time, statement, solution, score
        )
        question.id = question_id
        try:
            exam.add_question(question)
        except ExamError as error:
            logger.warning("%s", error)
        logger.info("Cargada pregunta ID %s: %s", question_id, statement)

    return exam


def save_exam(exam: Exam, path: str | os.PathLike[str]) -> Path:
    """Write an exam to a file and return its path."""
    target = Path(path)
    with target.open("w", encoding="utf-8", newline="") as handle:
        handle.write(format_exam(exam))
    return target


def load_exam(path: str | os.PathLike[str]) -> Exam:
    """Read an exam from a file written in the text format."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return parse_exam(handle.read())


def list_exam_files(directory: str | os.PathLike[str] = ".") -> list[str]:
    """Names of exam files in a directory, sorted, at most MAX_FILES of them."""
    names = sorted(
        name
        for name in os.listdir(directory)
        if len(name) >= 11 and name.startswith(FILE_PREFIX) and name.endswith(FILE_SUFFIX)
    )
    return names[:MAX_FILES]