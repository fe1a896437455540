import json

from cli import CLEAR_SCREEN, TodoShell
from list_storage import TaskList


def run_shell(task_list, *lines):
    """Feeds the given lines as console input, then ends input."""
    feed = iter(lines)
    output = []

    def read(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    shell = TodoShell(task_list, read=read, write=output.append)
    shell.run()
    return shell, output


def saved(task_list):
    return json.loads(task_list.path.read_text(encoding="utf-8"))


def test_add_then_exit(task_list):
    shell, output = run_shell(task_list, "2", "Buy milk", "3", "2003.12.12", "7")
    assert saved(task_list) == [{"Title": "Buy milk", "Status": False, "Priority": 3, "Deadline": "2003.12.12"}]
    assert shell.last_output == "Task added!"
    assert output[-1] == "Good bye!"


def test_non_numeric_priority_is_asked_again(task_list):
    run_shell(task_list, "2", "Buy milk", "high", "4", "", "7")
    assert saved(task_list)[0]["Priority"] == 4


def test_remove_then_show_renumbers(task_list):
    for title in ("first", "second", "third"):
        task_list.add(title, 0, "")
    task_list.save()

    shell, _ = run_shell(task_list, "4", "1", "1", "7")
    assert "Task(0): first" in shell.last_output
    assert "Task(1): third" in shell.last_output
    assert [e["Title"] for e in saved(task_list)] == ["first", "third"]


def test_mark_done_and_out_of_range(task_list):
    task_list.add("Buy milk", 0, "")
    task_list.save()

    shell, _ = run_shell(task_list, "3", "0")
    assert shell.last_output == "Marked Done!"
    assert saved(task_list)[0]["Status"] is True

    shell, _ = run_shell(task_list, "3", "9")
    assert shell.last_output == "You don't have this task number!"

    shell, _ = run_shell(task_list, "4", "abc")
    assert shell.last_output == "You don't have this task number!"


def test_edit_task(task_list):
    task_list.add("Buy milk", 3, "friday")
    task_list.save()

    shell, _ = run_shell(task_list, "5", "0", "Buy bread", "1", "monday")
    assert shell.last_output == "Task Edited!"
    assert saved(task_list) == [{"Title": "Buy bread", "Status": False, "Priority": 1, "Deadline": "monday"}]


def test_find_task(task_list):
    task_list.add("Walk dog", 0, "")
    task_list.add("Buy milk", 0, "")
    task_list.save()

    shell, _ = run_shell(task_list, "6", "MILK")
    assert shell.last_output == "Task(0): Buy milk\n"


def test_unknown_choice_reprompts_without_saving(task_list):
    shell, output = run_shell(task_list, "9")
    assert shell.last_output == "Choose from (1-7)!"
    assert not task_list.path.exists()
    # The menu was drawn a second time showing the message.
    assert output.count("Choose from (1-7)!") == 1


def test_menu_shows_previous_outcome(task_list):
    _, output = run_shell(task_list, "2", "Buy milk", "1", "", "1", "7")
    assert "Task added!" in output
    assert any("Task(0): Buy milk" in line for line in output)


def test_screen_clear_is_part_of_the_menu(task_list):
    _, output = run_shell(task_list, "7")
    assert output[0].startswith(CLEAR_SCREEN + "\nWhat you need?")
    assert CLEAR_SCREEN not in output
