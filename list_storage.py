# list_storage.py
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from models import ListEntry

logger = logging.getLogger(__name__)

RULE_TOP = "------------- TO DO LIST -------------"
RULE_BOTTOM = "--------------------------------------"


class TaskList:
    """
    The terminal variant's ordered list, persisted to List.json.

    Tasks have no id: edit, remove and mark-done address a task by its
    zero-based position at the time of the call, so removing a task shifts
    every later one down by one.
    """

    def __init__(self, path: Union[str, Path] = "List.json"):
        self.path = Path(path)
        self.entries: List[ListEntry] = []

    def __len__(self):
        return len(self.entries)

    def load(self) -> bool:
        """Read the file into the list. On any failure the current list is kept."""
        if not self.path.exists():
            return False
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f) or []
            self.entries = [ListEntry.model_validate(item) for item in data]
        except (OSError, ValueError, TypeError, ValidationError) as e:
            logger.error("Error while loading %s: %s", self.path, e)
            return False
        return True

    def save(self) -> bool:
        try:
            data = [entry.model_dump(by_alias=True) for entry in self.entries]
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing file %s: %s", self.path, e)
            return False
        return True

    def _check(self, position: int):
        if not 0 <= position < len(self.entries):
            raise IndexError(position)

    def add(self, title: str, priority: int, deadline: str) -> ListEntry:
        entry = ListEntry(title=title, priority=priority, deadline=deadline, status=False)
        self.entries.append(entry)
        return entry

    def mark_done(self, position: int):
        self._check(position)
        self.entries[position].status = True

    def remove(self, position: int) -> ListEntry:
        self._check(position)
        return self.entries.pop(position)

    def edit(self, position: int, title: str, priority: int, deadline: str):
        """Replaces the entry wholesale; the status goes back to not done."""
        self._check(position)
        self.entries[position] = ListEntry(title=title, priority=priority, deadline=deadline)

    def find(self, query: str) -> List[ListEntry]:
        needle = query.lower()
        return [e for e in self.entries if needle in e.title.lower()]

    def show(self) -> str:
        lines = [RULE_TOP]
        for i, entry in enumerate(self.entries):
            lines.append(f"Task({i}): {entry.title}\t\t[{str(entry.status).lower()}]")
            lines.append(f"Deadline({entry.deadline})")
            lines.append(f"Priority({entry.priority})")
        lines.append(RULE_BOTTOM)
        return "\n".join(lines) + "\n"


def render_matches(matches: List[ListEntry]) -> str:
    """Numbers matches by their index in the result set, not in the list."""
    if not matches:
        return "No matching task found!\n"
    return "".join(f"Task({i}): {entry.title}\n" for i, entry in enumerate(matches))
