# bancoexamen

A small question bank for building exams. Each question has a kind
(true/false, multiple choice or short answer), a level of Bloom's taxonomy
(0–5), an estimated time in minutes, a statement, an expected solution and a
score. Exams are saved as plain text files named `Examen_<name>.txt`, where
each space in the name becomes an underscore. They can be loaded back later.

## Installation

```
pip install .
```

## Interactive use

```
bancoexamen
bancoexamen --directory exams
```

`-d` / `--directory` sets the folder where exam files are written and
searched for. The default is the current directory. The command opens a
menu, in Spanish, with these options:

1. create an exam with a name, a subject and a maximum number of questions
2. load an exam from one of the `Examen_*.txt` files in the directory
3. add a question
4. update a question: replace it with a newly entered one, which may be of a
   different kind
5. delete a question after an S/N confirmation
6. show one question's details
7. list the questions at a given Bloom level
8. show the exam summary, including the total estimated time
9. list the questions
10. save the exam to its file
11. quit

Options 1, 3, 4, 5 and 10 write the exam to `Examen_<name>.txt` straight
away. The menu closes when input ends.

The file format stores only the questions. An exam loaded from a file is
therefore named "Examen TXT", has the subject "Asignatura TXT" and a limit of
100 questions. Saving it writes `Examen_Examen_TXT.txt`, not the file it was
loaded from.

## Library use

```python
from bancoexamen.exam import Exam
from bancoexamen.questions import QuestionKind, create_question
from bancoexamen.storage import exam_filename, load_exam, save_exam

exam = Exam("Parcial 1", "Historia", 10)
exam.add_question(
    create_question(QuestionKind.TRUE_FALSE, 0, 2, "¿1810?", "Verdadero", 5)
)
print(exam.summary())
print(exam.total_time())

path = exam_filename(exam.name)   # "Examen_Parcial_1.txt"
save_exam(exam, path)
loaded = load_exam(path)
```

### `bancoexamen.questions`

- `QuestionKind`: `TRUE_FALSE` (`"V"`), `MULTIPLE_CHOICE` (`"M"`) and
  `SHORT_ANSWER` (`"R"`).
- `Question` and its subclasses `TrueFalseQuestion`, `MultipleChoiceQuestion`
  and `ShortAnswerQuestion`. Every new question takes the next id from a
  counter shared by the whole process. `describe()` returns a multi-line text
  description of the question.
- `create_question(kind, bloom_level, estimated_time, statement, solution, score)`
  takes either a `QuestionKind` or its code letter.
- `bloom_name(level)` returns the name of a Bloom level, or "No definido" for
  a level outside 0–5.

### `bancoexamen.exam`

`Exam(name, subject, capacity)` keeps its questions in order. Its methods:

- `add_question`
- `find_question`
- `replace_question`, which keeps the position and returns the old question
- `remove_question`
- `filter_by_bloom`
- `total_time`
- `has_statement`
- `summary`
- `listing`

`add_question` raises `ExamFullError` when the exam already holds `capacity`
questions. It raises `DuplicateQuestionError` when a question with the same
statement is already in the exam. Looking up an id that is not present raises
`QuestionNotFoundError`. All three derive from `ExamError`.

### `bancoexamen.storage`

These functions read and write the text format:

- `format_exam` and `parse_exam` work on strings.
- `save_exam` and `load_exam` work on files.
- `exam_filename` builds the file name for an exam.
- `list_exam_files(directory)` returns the sorted names of exam files in a
  directory, at most 100 of them.
- `extract_digits` keeps only the digits of a string.

When `parse_exam` reads a file, it leaves out any block whose kind is
unknown. It also leaves out blocks with a duplicate statement and blocks past
the exam's limit, and it logs a warning for each of these.

## Running the tests

```
pip install .[test]
pytest
```