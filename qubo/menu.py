"""Interactive console menus for choosing a subject and chapter."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Callable, List, Optional

from .loader import LoadError, load_file
from .models import QuestionBank


class MenuExit(Exception):
    """Raised when the user chooses to quit from the main menu."""


def clear_screen() -> None:
    """Clear the console."""
    if os.name == "nt":
        subprocess.run(["cmd", "/c", "cls"], check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


class Menu:
    """Console menu driven by injectable input, output and screen-clearing callables."""

    def __init__(
        self,
        bank: QuestionBank,
        read: Callable[[], str] = input,
        write: Callable[[str], object] = print,
        clear: Callable[[], object] = clear_screen,
    ) -> None:
        self.bank = bank
        self._read = read
        self._write = write
        self._clear = clear
        self.selected_subject: Optional[int] = None
        self.selected_chapter: Optional[int] = None

    def _show(self, lines: List[str]) -> None:
        for line in lines:
            self._write(line)

    def _read_int(self) -> Optional[int]:
        try:
            return int(self._read().strip())
        except ValueError:
            return None

    def _read_letter(self) -> str:
        return self._read().strip()[:1]

    def main_menu(self) -> Optional[int]:
        """Show the main menu once and act on the choice; return the choice."""
        self._clear()
        self._show([
            "[ 메뉴 ]",
            "",
            "원하는 것을 선택해주세요.",
            "( 0: 종료 / 1: 외우기 모드 (답이 표시됩니다.) / 2: 실전 모드 (답이 표시되지 않습니다.) )",
            ":",
        ])
        choice = self._read_int()
        if choice == 0:
            self._write("종료합니다.")
            raise MenuExit
        if choice == 1:
            self.select_subject()
        return choice

    def select_subject(self) -> bool:
        """Choose a subject and chapter; return True once a chapter is confirmed."""
        while True:
            self._clear()
            self._show([
                "[ 과목 선택 ]",
                "",
                "원하는 과목의 번호를 입력해주세요.",
                "( 0 입력 시. 돌아가기 )",
                "",
            ])
            self._show(
                [f"[{number}] - {subject.name}" for number, subject in enumerate(self.bank.subjects, 1)]
            )
            choice = self._read_int()
            if choice == 0:
                return False
            if choice is None or not 1 <= choice <= len(self.bank.subjects):
                continue
            self.selected_subject = choice - 1
            outcome = self.select_chapter()
            if outcome is not None:
                return outcome

    def select_chapter(self) -> Optional[bool]:
        """Choose a chapter of the selected subject.

        Returns True when confirmed, False when the user abandons to the main
        menu, and None when the user goes back to the subject list.
        """
        if self.selected_subject is None:
            raise LookupError("no subject selected")
        subject = self.bank.subjects[self.selected_subject]
        while True:
            self._clear()
            self._show([
                "[ 챕터 선택 ]",
                "",
                f"' {subject.name} ' 과목이 선택되었습니다.",
                "",
                "원하는 챕터의 번호를 입력해주세요.",
                "( 0 입력 시. 돌아가기 )",
                "",
            ])
            self._show(
                [f"# {number} {chapter.name}" for number, chapter in enumerate(subject.chapters, 1)]
            )
            choice = self._read_int()
            if choice == 0:
                return None
            if choice is None or not 1 <= choice <= len(subject.chapters):
                continue
            self.selected_chapter = choice - 1
            return self.confirm_chapter()

    def confirm_chapter(self) -> bool:
        """Ask whether to go on with the selected chapter."""
        if self.selected_subject is None or self.selected_chapter is None:
            raise LookupError("no chapter selected")
        chapter = self.bank.subjects[self.selected_subject].chapters[self.selected_chapter]
        while True:
            self._clear()
            self._show([
                "[ 챕터 확인 ]",
                "",
                f"' {chapter.name} ' 챕터가 선택되었습니다.",
                "계속 진행할까요? (y/n)",
            ])
            answer = self._read_letter()
            if answer in ("n", "N"):
                self._write("처음으로 돌아갑니다.")
                return False
            if answer in ("y", "Y"):
                return True

    def run(self) -> None:
        """Ask whether to start, then loop over the main menu until the user quits."""
        try:
            while True:
                self._write("")
                self._write("프로그램을 실행합니까? (y/n)")
                self._write(":")
                answer = self._read_letter()
                if answer in ("n", "N"):
                    self._write("프로그램을 종료합니다.")
                    return
                if answer in ("y", "Y"):
                    while True:
                        self.main_menu()
                self._clear()
        except (MenuExit, EOFError):
            return


def main(argv: Optional[List[str]] = None) -> int:
    """Load the question file and start the interactive menu."""
    parser = argparse.ArgumentParser(prog="qubo", description="Study from a question file.")
    parser.add_argument("path", nargs="?", default="question.txt", help="question file")
    args = parser.parse_args(argv)
    try:
        bank = load_file(args.path)
    except LoadError as exc:
        print(exc)
        return 4
    Menu(bank).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())