"""Interactive menu-driven front end for the to-do store."""

from __future__ import annotations

import argparse
import re
import sqlite3
import sys
from typing import TextIO

from procrastinate.store import BadInputError, Store, Task, format_tasks

_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+", re.ASCII)

_FUNNY = "no funny business"
_BYE_MAIN = "thanks for your time"
_BYE_LIST = "Thank you for your time"
_PICK_TASK = "Pick any task by its number, click 0 to exit"


class _Quit(Exception):
    """Ends the session."""


def _parse(text: str, limit: int) -> int | None:
    text = text.strip()
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value <= limit else None


def _strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


class Session:
    """One interactive session reading commands from *stdin*."""

    def __init__(self, store: Store, stdin: TextIO, stdout: TextIO) -> None:
        self._store = store
        self._stdin = stdin
        self._stdout = stdout

    def _say(self, text: str) -> None:
        self._stdout.write(text + "\n")

    def _farewell(self, text: str) -> None:
        self._say(text)
        raise _Quit

    def _choice(self, limit: int) -> int | None:
        line = self._stdin.readline()
        if not line:
            raise _Quit
        return _parse(line, limit)

    def _text(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise BadInputError()
        return _strip_newline(line)

    def run(self) -> None:
        """Run menus until the user exits or input ends."""
        self._say("Hello, world!")
        self._say(
            "Welcome to your friendly neighbourhood to do list, "
            "start procrastinating now!"
        )
        current: tuple[str, int] | None = None
        try:
            while True:
                if current is None:
                    current = self.main_menu()
                elif self.list_menu(*current):
                    current = None
        except _Quit:
            return

    def main_menu(self) -> tuple[str, int] | None:
        """Show the main menu; return (name, id) of a list to enter, if any."""
        lists = self._store.lists()
        if not lists:
            self._say("You do not have any lists, create one now!")
            self._say("1.Create new list\t2.Exit")
            choice = self._choice(_U8_MAX)
            if choice is None:
                self._say(_FUNNY)
            elif choice == 1:
                self.prompt_new_list()
            else:
                self._farewell(_BYE_MAIN)
            return None

        self._say("1.Create new list\t2.View list\t3.Exit")
        choice = self._choice(_U8_MAX)
        if choice is None:
            self._say(_FUNNY)
            return None
        if choice == 1:
            self.prompt_new_list()
            return None
        if choice != 2:
            self._farewell(_BYE_MAIN)
        self._say("Here are your lists")

        for lst in lists:
            self._say(f"{lst.id:02} : {lst.name} ")
        self._say("Pick any list by its number, click 0 to exit")
        choice = self._choice(_U32_MAX)
        if choice is None:
            self._say(_FUNNY)
            return None
        if choice == 0:
            self._farewell(_BYE_MAIN)
        if 1 <= choice <= len(lists):
            found = next((lst for lst in lists if lst.id == choice), None)
            if found is not None:
                return found.name, found.id
        self._say("doesn't exist pal")
        return None

    def _pick_task(self, tasks: list[Task]) -> Task | None:
        self._stdout.write(format_tasks(tasks))
        self._say(_PICK_TASK)
        choice = self._choice(_U32_MAX)
        if choice is None:
            self._say(_FUNNY)
            return None
        if choice == 0:
            self._farewell(_BYE_LIST)
        task = next((t for t in tasks if t.id == choice), None)
        if task is None:
            self._say("doesn't exist mate")
        return task

    def list_menu(self, name: str, list_id: int) -> bool:
        """Show the menu of one list; return True to go back to the main menu."""
        self._say(name)
        tasks = self._store.tasks(list_id)
        if not tasks:
            self._say("This list has no tasks, add one now!")
            self._say("1.Create new task\t2.Exit")
            choice = self._choice(_U8_MAX)
            if choice is None:
                self._say(_FUNNY)
            elif choice == 1:
                self.prompt_new_task(list_id)
            else:
                self._farewell(_BYE_MAIN)
            return False

        self._say(
            "1.Add new task\t2.View tasks\t3.Update progress\t"
            "4.Delete a task\t5.Mark as completed\t6.Exit"
        )
        choice = self._choice(_U32_MAX)
        if choice is None:
            self._say(_FUNNY)
        elif choice == 1:
            self.prompt_new_task(list_id)
        elif choice == 2:
            self._stdout.write(format_tasks(tasks))
            self._say("1.Go back\t2.Exit")
            back = self._choice(_U32_MAX)
            if back is None:
                self._say(_FUNNY)
            elif back == 1:
                return True
            else:
                self._farewell(_BYE_LIST)
        elif choice in (3, 5):
            task = self._pick_task(tasks)
            if task is not None:
                if task.is_complete():
                    self._say("You've already completed that")
                elif choice == 3:
                    self.prompt_update(task)
                else:
                    self.prompt_mark(task)
        elif choice == 4:
            task = self._pick_task(tasks)
            if task is not None:
                self.prompt_delete(task)
        else:
            self._farewell(_BYE_LIST)
        return False

    def prompt_new_list(self) -> None:
        """Ask for a list name and create the list."""
        self._say("What do you want to name your new list?")
        name = self._text()
        self._store.add_list(name)
        self._say(f"succesfully added list {name}")

    def prompt_new_task(self, list_id: int) -> None:
        """Ask for a task name and add it to the list."""
        self._say("What is your new task?")
        name = self._text()
        self._store.add_task(list_id, name)
        self._say(f"succesfully added task {name}")

    def prompt_update(self, task: Task) -> None:
        """Ask for new progress on a task and record it."""
        self._say(f"Current Progress: {task.progress}")
        self._say("What is the progress you've made?")
        progress = self._text()
        self._store.update_progress(task.id, progress)
        self._say(f"Updated progress to {progress}")

    def _confirm(self) -> bool:
        line = self._stdin.readline()
        answer = _parse(line, _U8_MAX)
        if answer is None:
            raise BadInputError()
        return answer == 0

    def prompt_delete(self, task: Task) -> None:
        """Confirm and delete a task."""
        self._say(f"Are you sure you want to delete this task: {task.name}")
        self._say("Click 0 for yes 1 for no")
        if self._confirm():
            self._store.delete_task(task.id)
            self._say("Deleted task successfuly")

    def prompt_mark(self, task: Task) -> None:
        """Confirm and mark a task as completed."""
        self._say(f"Completed task: {task.name}")
        self._say("Click 0 to mark as completed, 1 to go back")
        if self._confirm():
            self._store.mark_complete(task.id)
            self._say("Marked as complete")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on the database in the current directory."""
    parser = argparse.ArgumentParser(
        prog="procrastinate", description="A small interactive to-do list."
    )
    parser.parse_args(argv)
    try:
        with Store.open() as store:
            Session(store, sys.stdin, sys.stdout).run()
    except (BadInputError, sqlite3.Error, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())