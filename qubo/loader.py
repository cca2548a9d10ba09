"""Reader for the plain-text question file."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Iterable, Optional, Union
import os

from .models import MultipleChoice, Note, QuestionBank, ShortAnswer

Report = Callable[[str], object]


class LoadError(Exception):
    """Raised when the question file cannot be opened or understood."""


class LoadState(Enum):
    """What kind of multi-line entry the loader is in the middle of."""

    NONE = auto()
    MULTIPLE = auto()
    SHORT = auto()


def trim(text: str) -> str:
    """Remove leading and trailing spaces (only spaces)."""
    return text.strip(" ")


class Loader:
    """Line-by-line parser that builds a :class:`QuestionBank`.

    Format: ``[name]`` starts a subject, ``#name`` a chapter, ``qm`` a
    multiple-choice question followed by ``-`` choice lines and a 1-based
    answer digit, ``qs`` a short-answer question followed by its answer line,
    and ``qn`` a note. Other lines are ignored.
    """

    def __init__(self, report: Report = print) -> None:
        self.bank = QuestionBank()
        self.state = LoadState.NONE
        self._report = report
        self._pending_count = False
        self._current: Optional[Union[MultipleChoice, ShortAnswer]] = None
        self._line_number = 0

    def feed(self, line: str) -> None:
        """Process one line of the file."""
        self._line_number += 1
        line = line.rstrip("\r\n")
        try:
            if self.state is LoadState.MULTIPLE:
                self._multiple_line(line)
            elif self.state is LoadState.SHORT:
                self._short_answer(line)
            elif line.startswith("["):
                self._report_count()
                self._subject(line)
            elif line.startswith("#"):
                self._report_count()
                self._chapter(line)
            elif line.startswith("qm"):
                self._start_multiple(trim(line[2:]))
            elif line.startswith("qs"):
                self._start_short(trim(line[2:]))
            elif line.startswith("qn"):
                self._note(trim(line[2:]))
        except LookupError as exc:
            raise LoadError(f"line {self._line_number}: {exc}") from exc

    def finish(self) -> QuestionBank:
        """Report the last chapter's count and return the bank."""
        self._report_count()
        return self.bank

    def _subject(self, line: str) -> None:
        name = trim(line[1:].split("]", 1)[0])
        subject = self.bank.add_subject(name)
        self._report(f"- [ {subject.name} ]")
        self._report("")

    def _chapter(self, line: str) -> None:
        chapter = self.bank.current_subject().add_chapter(trim(line[1:]))
        self._report(f"  # {chapter.name}")

    def _start_multiple(self, text: str) -> None:
        self._current = self.bank.current_chapter().add(MultipleChoice(text))
        self.state = LoadState.MULTIPLE

    def _multiple_line(self, line: str) -> None:
        assert isinstance(self._current, MultipleChoice)
        if line.startswith("-"):
            self._current.choices.append(trim(line[1:]))
            return
        answer = trim(line)
        if not answer or answer[0] not in "123456789":
            raise LoadError(
                f"line {self._line_number}: expected an answer digit 1-9, got {answer!r}"
            )
        self._current.answer = int(answer[0]) - 1
        self._complete()

    def _start_short(self, text: str) -> None:
        self._current = self.bank.current_chapter().add(ShortAnswer(text))
        self.state = LoadState.SHORT

    def _short_answer(self, line: str) -> None:
        assert isinstance(self._current, ShortAnswer)
        self._current.answer = trim(line)
        self._complete()

    def _note(self, text: str) -> None:
        self.bank.current_chapter().add(Note(text))
        self._pending_count = True

    def _complete(self) -> None:
        self.state = LoadState.NONE
        self._current = None
        self._pending_count = True

    def _report_count(self) -> None:
        if not self._pending_count:
            return
        count = len(self.bank.current_chapter().questions)
        self._report(f"    - {count}문제 불러옴")
        self._pending_count = False


def parse(lines: Iterable[str], report: Report = print) -> QuestionBank:
    """Build a question bank from an iterable of lines."""
    loader = Loader(report)
    for line in lines:
        loader.feed(line)
    return loader.finish()


def load_file(
    path: Union[str, "os.PathLike[str]"] = "question.txt", report: Report = print
) -> QuestionBank:
    """Read a question file from disk."""
    report("파일을 불러오는 중입니다...")
    report("")
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise LoadError("파일 열기 실패") from exc
    with handle:
        return parse(handle, report)