# cli.py
import argparse
from typing import Callable, Optional

import config
from list_storage import TaskList, render_matches

CLEAR_SCREEN = "\033[H\033[2J"
MENU = (
    "\nWhat you need?\n"
    "1.Show list\n"
    "2.Add task\n"
    "3.Mark done\n"
    "4.Remove task\n"
    "5.Edit task\n"
    "6.Find task\n"
    "7.Exit\n"
    "==================================="
)
OUT_OF_RANGE = "You don't have this task number!"


class TodoShell:
    """
    Menu loop over a TaskList. Each cycle reloads the file, redraws the menu
    with the outcome of the previous action, runs one action and saves.
    """

    def __init__(self, tasks: TaskList,
                 read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print):
        self.tasks = tasks
        self.read = read
        self.write = write
        self.last_output = ""
        self.actions = {
            "1": self.show_list,
            "2": self.add_task,
            "3": self.mark_done,
            "4": self.remove_task,
            "5": self.edit_task,
            "6": self.find_task,
        }

    def run(self):
        while True:
            self.tasks.load()
            self.write(CLEAR_SCREEN + MENU)
            self.write(self.last_output)
            try:
                choice = self.read("").strip()
            except EOFError:
                return
            if choice == "7":
                self.write("Good bye!")
                return
            action = self.actions.get(choice)
            if action is None:
                self.last_output = "Choose from (1-7)!"
                continue
            try:
                action()
            except EOFError:
                return
            self.tasks.save()

    # --- Prompts ---

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self.read(prompt + "\n").strip()
            try:
                return int(raw)
            except ValueError:
                self.write("Please enter a whole number.")

    def _ask_position(self, prompt: str) -> Optional[int]:
        raw = self.read(prompt + "\n").strip()
        try:
            position = int(raw)
        except ValueError:
            return None
        if not 0 <= position < len(self.tasks):
            return None
        return position

    # --- Actions ---

    def show_list(self):
        self.last_output = self.tasks.show()

    def add_task(self):
        title = self.read("Write your new task:\n")
        priority = self._ask_int("Write your new task priority:")
        deadline = self.read("Write your new task deadline: 2003.12.12\n").strip()
        self.tasks.add(title, priority, deadline)
        self.last_output = "Task added!"

    def mark_done(self):
        position = self._ask_position("Enter number of task you done:")
        if position is None:
            self.last_output = OUT_OF_RANGE
            return
        self.tasks.mark_done(position)
        self.last_output = "Marked Done!"

    def remove_task(self):
        position = self._ask_position("Enter number of task you want to remove:")
        if position is None:
            self.last_output = OUT_OF_RANGE
            return
        self.tasks.remove(position)
        self.last_output = "Task removed!"

    def edit_task(self):
        position = self._ask_position("Enter number of task you want to edit:")
        if position is None:
            self.last_output = OUT_OF_RANGE
            return
        title = self.read("Enter new task title:\n")
        priority = self._ask_int("Enter new priority:")
        deadline = self.read("Enter new deadline:\n").strip()
        self.tasks.edit(position, title, priority, deadline)
        self.last_output = "Task Edited!"

    def find_task(self):
        query = self.read("What you searching for?\n")
        self.last_output = render_matches(self.tasks.find(query))


def main():
    parser = argparse.ArgumentParser(description="Interactive terminal to-do list.")
    parser.add_argument("--file", type=str, default=config.LIST_FILE, help="Path to the list JSON file.")
    args = parser.parse_args()

    config.setup_logging()
    TodoShell(TaskList(args.file)).run()


if __name__ == "__main__":
    main()
