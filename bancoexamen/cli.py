"""Interactive menu for creating, editing, saving and loading exams."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from bancoexamen.exam import Exam, ExamError, QuestionNotFoundError
from bancoexamen.questions import Question, QuestionKind, create_question
from bancoexamen.storage import exam_filename, list_exam_files, load_exam, save_exam

MAX_EXAMS = 100

_MENU = """
=== MENÚ ===
1. Crear Examen
2. Cargar Examen desde archivo TXT
3. Añadir Pregunta
4. Actualizar Pregunta
5. Borrar Pregunta
6. Consultar Info Pregunta
7. Filtrar Pregunta
8. Mostrar Evaluación
9. Mostrar Preguntas
10. Guardar Examen a archivo TXT
11. Salir
Elija una opción: """

_KIND_MENU = """
Tipo de Pregunta:
1 = Verdadero/Falso
2 = Selección Múltiple
3 = Respuesta Corta
Elija una opción: """

_KIND_PROMPT = "Tipo de Pregunta (1=Verdadero/Falso, 2=Selección Múltiple, 3=Respuesta Corta): "

_KINDS_BY_CHOICE = {
    1: QuestionKind.TRUE_FALSE,
    2: QuestionKind.MULTIPLE_CHOICE,
    3: QuestionKind.SHORT_ANSWER,
}

_EXIT = 11


class Session:
    """One run of the menu over a set of exams kept in memory."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        directory: str | os.PathLike[str] = ".",
        exams: list[Exam] | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.directory = Path(directory)
        self.exams: list[Exam] = list(exams) if exams else []

    # --- input and output -------------------------------------------------

    def _say(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _ask_int(self, prompt: str, retry: str | None = None) -> int:
        current = prompt
        while True:
            answer = self._ask(current).strip()
            try:
                return int(answer)
            except ValueError:
                current = retry if retry is not None else prompt

    def _ask_kind(self, prompt: str) -> QuestionKind:
        while True:
            choice = self._ask_int(prompt)
            if choice in _KINDS_BY_CHOICE:
                return _KINDS_BY_CHOICE[choice]

    def _ask_question(self, kind_prompt: str) -> Question:
        kind = self._ask_kind(kind_prompt)
        bloom_level = self._ask_int("Nivel de Taxonomía de Bloom (0-5): ")
        estimated_time = self._ask_int("Tiempo Estimado (minutos): ")
        statement = self._ask("Enunciado: ")
        solution = self._ask("Solución Esperada: ")
        score = self._ask_int("Puntaje: ")
        return create_question(kind, bloom_level, estimated_time, statement, solution, score)

    # --- helpers ----------------------------------------------------------

    def _save(self, exam: Exam) -> None:
        filename = exam_filename(exam.name)
        try:
            save_exam(exam, self.directory / filename)
        except OSError:
            self._say("Error al abrir el archivo TXT para escribir.")
            return
        self._say(f"Examen guardado correctamente en {filename}")

    def _select_exam(self) -> Exam | None:
        if not self.exams:
            self._say("No hay exámenes disponibles.")
            return None
        self._say()
        self._say("Lista de exámenes disponibles:")
        for index, exam in enumerate(self.exams):
            self._say(f"{index}. {exam.name}")
        index = self._ask_int("Ingrese el índice del examen a seleccionar: ")
        if not 0 <= index < len(self.exams):
            self._say("Índice no válido.")
            return None
        return self.exams[index]

    def _show_available(self, exam: Exam) -> None:
        self._say()
        self._say("Estas son las preguntas disponibles:")
        self._say()
        self._say(exam.listing())

    # --- menu actions -----------------------------------------------------

    def _create_exam(self) -> None:
        if len(self.exams) >= MAX_EXAMS:
            self._say("Ha alcanzado el máximo número de exámenes.")
            return
        name = self._ask("Nombre del Examen: ")
        subject = self._ask("Asignatura: ")
        capacity = self._ask_int("Cantidad de Preguntas (máximo): ")
        exam = Exam(name, subject, capacity)
        self.exams.append(exam)
        self._save(exam)
        self._say(f"Examen '{name}' creado y guardado en '{exam_filename(name)}'.")

    def _load_exam(self) -> None:
        try:
            files = list_exam_files(self.directory)
        except OSError:
            self._say("No se pudo abrir el directorio actual.")
            files = []
        if not files:
            self._say("No se encontraron archivos de exámenes.")
            return
        self._say()
        self._say("Archivos de exámenes disponibles:")
        for index, name in enumerate(files):
            self._say(f"{index}. {name}")
        index = self._ask_int("Ingrese el número del archivo a cargar: ")
        if not 0 <= index < len(files):
            self._say("Índice de archivo no válido.")
            return
        chosen = files[index]
        try:
            exam = load_exam(self.directory / chosen)
        except OSError:
            self._say(f"Error al abrir el archivo TXT: {chosen}")
            return
        for question in exam:
            self._say()
            self._say(f"Cargada pregunta ID {question.id}: {question.statement}")
        self.exams.append(exam)
        self._say()
        self._say(f"Examen cargado desde '{chosen}'.")

    def _add_question(self) -> None:
        exam = self._select_exam()
        if exam is None:
            return
        question = self._ask_question(_KIND_MENU)
        try:
            exam.add_question(question)
        except ExamError as error:
            self._say(str(error))
        self._save(exam)

    def _update_question(self) -> None:
        exam = self._select_exam()
        if exam is None:
            return
        self._show_available(exam)
        question_id = self._ask_int("\nIngrese el ID de la pregunta a actualizar: ")
        try:
            exam.find_question(question_id)
        except QuestionNotFoundError as error:
            self._say(str(error))
        else:
            exam.replace_question(question_id, self._ask_question(_KIND_PROMPT))
        self._save(exam)

    def _remove_question(self) -> None:
        exam = self._select_exam()
        if exam is None:
            return
        self._show_available(exam)
        question_id = self._ask_int("\nID de la pregunta a borrar: ")
        answer = self._ask(
            f"\n¿Está seguro de que desea borrar el ítem ({question_id})? (S/N): "
        ).strip()
        if answer[:1].upper() != "S":
            self._say("Operación cancelada.")
            return
        try:
            exam.remove_question(question_id)
        except QuestionNotFoundError as error:
            self._say(str(error))
        self._save(exam)

    def _consult_question(self) -> None:
        exam = self._select_exam()
        if exam is None:
            return
        question_id = self._ask_int("ID de la pregunta a consultar: ")
        self._say()
        self._say("Preguntas disponibles:")
        for question in exam:
            self._say(f"ID {question.id}: {question.statement}")
        try:
            question = exam.find_question(question_id)
        except QuestionNotFoundError as error:
            self._say(str(error))
            return
        self._say()
        self._say("Detalles de la pregunta seleccionada:")
        self._say(question.describe())

    def _filter_questions(self) -> None:
        exam = self._select_exam()
        if exam is None:
            return
        level = self._ask_int("Nivel de Bloom a filtrar (0-5): ")
        for question in exam.filter_by_bloom(level):
            self._say(question.describe())
            self._say("------------------------")

    def _show_summary(self) -> None:
        exam = self._select_exam()
        if exam is not None:
            self._say()
            self._say(exam.summary())

    def _show_listing(self) -> None:
        exam = self._select_exam()
        if exam is not None:
            self._say()
            self._say(exam.listing())

    def _save_selected(self) -> None:
        exam = self._select_exam()
        if exam is not None:
            self._save(exam)

    # --- main loop --------------------------------------------------------

    def _read_option(self) -> int:
        retry = "Ingreso no válido. Ingrese un número entre 1 y 11: "
        prompt = _MENU
        while True:
            option = self._ask_int(prompt, retry)
            if 1 <= option <= _EXIT:
                return option
            prompt = retry

    def run(self) -> None:
        """Show the menu and carry out choices until the user leaves or input ends."""
        actions = {
            1: self._create_exam,
            2: self._load_exam,
            3: self._add_question,
            4: self._update_question,
            5: self._remove_question,
            6: self._consult_question,
            7: self._filter_questions,
            8: self._show_summary,
            9: self._show_listing,
            10: self._save_selected,
        }
        try:
            while True:
                option = self._read_option()
                if option == _EXIT:
                    self._say("Que tenga una buena jornada. Adiós.")
                    return
                actions[option]()
        except EOFError:
            self._say()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Banco de preguntas de exámenes.")
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directorio donde se guardan y buscan los archivos de examen",
    )
    args = parser.parse_args(argv)
    Session(directory=args.directory).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())