# qubo

A small terminal question bank. It reads study material from a plain text
file, organises it into subjects and chapters, reports how many questions
each chapter holds, and then offers a menu for picking a subject and a
chapter. The prompts and messages are in Korean.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
qubo [path]
```

`path` defaults to `question.txt` in the current directory. The file is read
as UTF-8. If it cannot be opened or is malformed, the error is printed and
the command exits with status 4.

While loading, the program prints each subject (`- [ name ]`), each chapter
(`  # name`) and, after a chapter that holds questions, how many it holds
(`    - N문제 불러옴`). It then asks whether to start (`y`/`n`); any other
answer clears the screen and asks again.

The main menu offers:

- `0` quit
- `1` memorise mode
- `2` practice mode

Any other input shows the main menu again.

Choosing `1` lists the subjects by number. Entering `0` returns to the main
menu; a number outside the list asks again. After a subject, the chapters are
listed by number; `0` goes back to the subject list. Finally the chapter is
confirmed with `y`, or `n` returns to the main menu. End of input at any
prompt ends the program.

## What it does not do

Choosing a chapter is as far as the menus go: after `y` the program returns
to the main menu without showing any questions. Practice mode (`2`) does
nothing yet, and there is no scoring or record of progress. The loaded
questions are available through the Python API below.

## File format

Each line is read on its own. Leading and trailing spaces are trimmed.

```
[ Biology ]
# Cells
qm Which organelle makes ATP?
- Nucleus
- Mitochondrion
- Ribosome
2
qs What is the basic unit of life?
The cell
qn Cells were first described in the 17th century.
```

- `[name]` starts a new subject.
- `#name` starts a new chapter in the current subject.
- `qm question` starts a multiple-choice question. Each following line that
  starts with `-` is a choice. The first line after the choices that does
  not start with `-` must begin with a digit `1`–`9`, the number of the
  correct choice; it is stored as a zero-based index.
- `qs question` starts a short-answer question. The next line is its answer.
- `qn text` adds a note to the current chapter.
- Any other line is ignored.

Questions and notes belong to the most recent chapter, and chapters to the
most recent subject. A chapter before any subject, or a question before any
chapter, is an error.

## Using it from Python

`qubo.loader.load_file(path, report)` reads a file into a
`qubo.models.QuestionBank`; `qubo.loader.parse(lines, report)` does the same
for any iterable of lines. `report` is a callable that receives the progress
messages (`print` by default). Problems raise `qubo.loader.LoadError`.
`qubo.loader.Loader` can also be fed line by line with `feed()` and finished
with `finish()`.

A `QuestionBank` holds `subjects`; each `Subject` holds `chapters`; each
`Chapter` holds `questions`, which are `MultipleChoice` (`question`,
`choices`, `answer`), `ShortAnswer` (`question`, `answer`) or `Note`
(`content`).

`qubo.menu.Menu(bank, read, write, clear)` runs the menus over a bank. The
`read`, `write` and `clear` callables default to `input`, `print` and
`qubo.menu.clear_screen`, so the menus can also be driven without a
terminal. After a confirmed choice, `selected_subject` and
`selected_chapter` hold the zero-based indexes.