"""Data model for a question bank: subjects hold chapters, chapters hold questions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

MAX_TEXT_LENGTH = 256


@dataclass
class MultipleChoice:
    """A multiple-choice question; ``answer`` is the zero-based index of the right choice."""

    question: str
    choices: List[str] = field(default_factory=list)
    answer: Optional[int] = None


@dataclass
class ShortAnswer:
    """A question answered with a short piece of text."""

    question: str
    answer: str = ""


@dataclass
class Note:
    """A piece of study material that asks nothing."""

    content: str


Question = Union[MultipleChoice, ShortAnswer, Note]


@dataclass
class Chapter:
    """A named group of questions within a subject."""

    name: str
    questions: List[Question] = field(default_factory=list)

    def add(self, question: Question) -> Question:
        """Append a question and return it."""
        self.questions.append(question)
        return question


@dataclass
class Subject:
    """A named group of chapters."""

    name: str
    chapters: List[Chapter] = field(default_factory=list)

    def add_chapter(self, name: str) -> Chapter:
        """Append a new, empty chapter and return it."""
        chapter = Chapter(name)
        self.chapters.append(chapter)
        return chapter

    def current_chapter(self) -> Chapter:
        """Return the most recently added chapter."""
        if not self.chapters:
            raise LookupError(f"subject {self.name!r} has no chapter yet")
        return self.chapters[-1]


@dataclass
class QuestionBank:
    """All subjects known to the program."""

    subjects: List[Subject] = field(default_factory=list)

    def add_subject(self, name: str) -> Subject:
        """Append a new, empty subject and return it."""
        subject = Subject(name)
        self.subjects.append(subject)
        return subject

    def current_subject(self) -> Subject:
        """Return the most recently added subject."""
        if not self.subjects:
            raise LookupError("no subject has been defined yet")
        return self.subjects[-1]

    def current_chapter(self) -> Chapter:
        """Return the most recently added chapter of the most recent subject."""
        return self.current_subject().current_chapter()