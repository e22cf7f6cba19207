import pytest

from bancoexamen.exam import Exam
from bancoexamen.questions import (
    MultipleChoiceQuestion,
    QuestionKind,
    ShortAnswerQuestion,
    TrueFalseQuestion,
    create_question,
)
from bancoexamen.storage import (
    LOADED_CAPACITY,
    LOADED_NAME,
    LOADED_SUBJECT,
    MAX_FILES,
    exam_filename,
    extract_digits,
    format_exam,
    list_exam_files,
    load_exam,
    parse_exam,
    save_exam,
)


def _sample_exam():
    exam = Exam("Parcial Uno", "Historia", 10)
    exam.add_question(create_question("V", 1, 5, "La tierra es plana", "Falso", 2))
    exam.add_question(create_question("M", 3, 10, 'Elija "la" correcta', "b", 4))
    exam.add_question(create_question("R", 5, 15, "Defina: estado", "Una entidad", 6))
    return exam


def _block(statement, qid, bloom, score, solution, time, code):
    return (
        f'"enunciado": "{statement}",\n'
        f'"id":{qid},\n'
        f'"nivelBloom":{bloom},\n'
        f'"puntaje":{score},\n'
        f'"solucion": "{solution}",\n'
        f'"tiempoEstimado":{time},\n'
        f'"tipo": "{code}"\n\n'
    )


def test_extract_digits_keeps_only_digits():
    assert extract_digits("a1b2c3") == "123"
    assert extract_digits("abc") == ""
    assert extract_digits("-5,") == "5"


def test_exam_filename_replaces_spaces():
    assert exam_filename("Mi Examen Final") == "Examen_Mi_Examen_Final.txt"
    assert exam_filename("") == "Examen_.txt"


def test_format_empty_exam_is_header_only():
    assert format_exam(Exam("x", "y", 3)) == "Preguntas\n\n"


def test_format_single_question_block():
    question = TrueFalseQuestion(2, 7, "Hola", "Si", 3, id=42)
    exam = Exam("x", "y", 3, [question])
    assert format_exam(exam) == "Preguntas\n\n" + _block("Hola", 42, 2, 3, "Si", 7, "V")


def test_round_trip_through_text():
    exam = _sample_exam()
    loaded = parse_exam(format_exam(exam))
    assert [
        (q.id, q.kind, q.bloom_level, q.estimated_time, q.statement, q.solution, q.score)
        for q in loaded
    ] == [
        (q.id, q.kind, q.bloom_level, q.estimated_time, q.statement, q.solution, q.score)
        for q in exam
    ]


def test_parsed_exam_has_default_header_fields():
    loaded = parse_exam(format_exam(_sample_exam()))
    assert loaded.name == LOADED_NAME
    assert loaded.subject == LOADED_SUBJECT
    assert loaded.capacity == LOADED_CAPACITY


def test_parsed_questions_have_right_classes():
    loaded = parse_exam(format_exam(_sample_exam()))
    assert [type(q) for q in loaded] == [
        TrueFalseQuestion,
        MultipleChoiceQuestion,
        ShortAnswerQuestion,
    ]


def test_parse_skips_lines_before_header():
    text = "basura\notra linea\nPreguntas\n\n" + _block("Uno", 9, 1, 2, "s", 3, "R")
    loaded = parse_exam(text)
    assert [q.statement for q in loaded] == ["Uno"]
    assert loaded.find_question(9).kind is QuestionKind.SHORT_ANSWER


def test_parse_without_header_gives_empty_exam():
    assert len(parse_exam(_block("Uno", 1, 1, 1, "s", 1, "V"))) == 0


def test_parse_empty_text():
    assert len(parse_exam("")) == 0


def test_parse_non_numeric_fields_become_zero():
    text = "Preguntas\n\n" + _block("Uno", "x", "y", "z", "s", "w", "M")
    loaded = parse_exam(text)
    question = loaded.questions[0]
    assert (question.id, question.bloom_level, question.score, question.estimated_time) == (
        0,
        0,
        0,
        0,
    )


def test_parse_skips_unknown_kind():
    text = (
        "Preguntas\n\n"
        + _block("Uno", 1, 1, 1, "s", 1, "X")
        + _block("Dos", 2, 1, 1, "s", 1, "V")
    )
    assert [q.statement for q in parse_exam(text)] == ["Dos"]


def test_parse_drops_duplicate_statements():
    text = (
        "Preguntas\n\n"
        + _block("Igual", 1, 1, 1, "a", 1, "V")
        + _block("Igual", 2, 2, 2, "b", 2, "M")
    )
    loaded = parse_exam(text)
    assert [q.id for q in loaded] == [1]


def test_parse_drops_truncated_block():
    full = _block("Uno", 1, 1, 1, "s", 1, "V")
    partial = '"enunciado": "Dos",\n"id":2,\n"nivelBloom":1,\n'
    loaded = parse_exam("Preguntas\n\n" + full + partial)
    assert [q.statement for q in loaded] == ["Uno"]


def test_parse_handles_crlf_line_endings():
    text = ("Preguntas\n\n" + _block("Uno", 4, 2, 3, "s", 5, "V")).replace("\n", "\r\n")
    loaded = parse_exam(text)
    question = loaded.questions[0]
    assert (question.statement, question.id, question.solution, question.code) == (
        "Uno",
        4,
        "s",
        "V",
    )


def test_parse_stops_at_capacity():
    blocks = "".join(
        _block(f"P{n}", n, 0, 1, "s", 1, "V") for n in range(LOADED_CAPACITY + 5)
    )
    loaded = parse_exam("Preguntas\n\n" + blocks)
    assert len(loaded) == LOADED_CAPACITY
    assert loaded.questions[-1].statement == f"P{LOADED_CAPACITY - 1}"


def test_save_and_load_round_trip(tmp_path):
    exam = _sample_exam()
    path = save_exam(exam, tmp_path / exam_filename(exam.name))
    assert path.read_text(encoding="utf-8") == format_exam(exam)
    loaded = load_exam(path)
    assert [(q.id, q.statement, q.code) for q in loaded] == [
        (q.id, q.statement, q.code) for q in exam
    ]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_exam(tmp_path / "Examen_nada.txt")


def test_list_exam_files_limit(tmp_path):
    for n in range(MAX_FILES + 10):
        (tmp_path / exam_filename(f"{n:04d}")).write_text("", encoding="utf-8")
    names = list_exam_files(tmp_path)
    assert len(names) == MAX_FILES
    assert names == sorted(names)


def test_list_exam_files_sees_saved_exam(tmp_path):
    exam = _sample_exam()
    save_exam(exam, tmp_path / exam_filename(exam.name))
    assert list_exam_files(tmp_path) == [exam_filename(exam.name)]