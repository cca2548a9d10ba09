import pytest

from qubo.models import (
    Chapter,
    MultipleChoice,
    Note,
    QuestionBank,
    ShortAnswer,
    Subject,
)


def test_multiple_choice_defaults():
    question = MultipleChoice("pick one")
    assert question.choices == []
    assert question.answer is None


def test_short_answer_default_answer_is_empty():
    assert ShortAnswer("capital?").answer == ""


def test_chapter_add_returns_and_keeps_order():
    chapter = Chapter("one")
    first = chapter.add(Note("a"))
    second = chapter.add(ShortAnswer("b", "c"))
    assert first == Note("a")
    assert chapter.questions == [first, second]


def test_subject_add_chapter_becomes_current():
    subject = Subject("math")
    subject.add_chapter("first")
    latest = subject.add_chapter("second")
    assert subject.current_chapter() is latest
    assert [c.name for c in subject.chapters] == ["first", "second"]


def test_subject_without_chapter_raises():
    with pytest.raises(LookupError):
        Subject("empty").current_chapter()


def test_bank_current_subject_and_chapter():
    bank = QuestionBank()
    bank.add_subject("a")
    subject = bank.add_subject("b")
    chapter = subject.add_chapter("c")
    assert bank.current_subject() is subject
    assert bank.current_chapter() is chapter


def test_bank_without_subject_raises():
    with pytest.raises(LookupError):
        QuestionBank().current_subject()


def test_bank_subject_without_chapter_raises():
    bank = QuestionBank()
    bank.add_subject("only")
    with pytest.raises(LookupError):
        bank.current_chapter()