import pytest

from qubo.menu import Menu, MenuExit, main
from qubo.models import QuestionBank


def make_bank():
    bank = QuestionBank()
    math = bank.add_subject("math")
    math.add_chapter("algebra")
    english = bank.add_subject("english")
    english.add_chapter("grammar")
    english.add_chapter("reading")
    return bank


def make_menu(inputs):
    feed = iter(inputs)
    out = []
    clears = []

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    menu = Menu(make_bank(), read, out.append, lambda: clears.append(True))
    return menu, out, clears


def test_main_menu_zero_exits():
    menu, out, _ = make_menu(["0"])
    with pytest.raises(MenuExit):
        menu.main_menu()
    assert out[-1] == "종료합니다."


def test_main_menu_selects_chapter():
    menu, out, _ = make_menu(["1", "2", "2", "y"])
    assert menu.main_menu() == 1
    assert (menu.selected_subject, menu.selected_chapter) == (1, 1)
    assert "' english ' 과목이 선택되었습니다." in out
    assert "' reading ' 챕터가 선택되었습니다." in out


def test_subject_listing_and_back():
    menu, out, _ = make_menu(["0"])
    assert menu.select_subject() is False
    assert menu.selected_subject is None
    assert "[1] - math" in out
    assert "[2] - english" in out


def test_chapter_back_returns_to_subject_list():
    menu, out, _ = make_menu(["2", "0", "0"])
    assert menu.select_subject() is False
    assert out.count("[ 과목 선택 ]") == 2
    assert "# 2 reading" in out


def test_out_of_range_subject_reprompts():
    menu, out, _ = make_menu(["9", "abc", "1", "1", "Y"])
    assert menu.select_subject() is True
    assert out.count("[ 과목 선택 ]") == 3
    assert menu.selected_chapter == 0


def test_confirm_no_goes_back():
    menu, out, _ = make_menu(["1", "1", "n"])
    assert menu.select_subject() is False
    assert out[-1] == "처음으로 돌아갑니다."


def test_confirm_repeats_until_answer():
    menu, out, clears = make_menu(["", "x", "y"])
    menu.selected_subject = 0
    menu.selected_chapter = 0
    assert menu.confirm_chapter() is True
    assert len(clears) == 3
    assert out.count("[ 챕터 확인 ]") == 3


def test_confirm_without_selection_raises():
    menu, _, _ = make_menu([])
    with pytest.raises(LookupError):
        menu.confirm_chapter()


def test_run_no_quits():
    menu, out, _ = make_menu(["n"])
    menu.run()
    assert out[-1] == "프로그램을 종료합니다."


def test_run_yes_then_quit_from_menu():
    menu, out, _ = make_menu(["q", "y", "2", "0"])
    menu.run()
    assert out.count("프로그램을 실행합니까? (y/n)") == 2
    assert out.count("[ 메뉴 ]") == 2
    assert out[-1] == "종료합니다."


def test_run_stops_at_end_of_input():
    menu, out, _ = make_menu(["y"])
    menu.run()
    assert out[-1] == ":"
    assert "[ 메뉴 ]" in out


def test_main_missing_file_returns_four(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 4
    assert "파일 열기 실패" in capsys.readouterr().out