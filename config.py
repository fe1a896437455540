# config.py
import logging
import os
import sys

from dotenv import load_dotenv

# --- Environment loading ---
load_dotenv()

# --- Settings ---
TASKS_FILE = os.getenv("TODO_TASKS_FILE", "tasks.json")
LIST_FILE = os.getenv("TODO_LIST_FILE", "List.json")
HOST = os.getenv("TODO_HOST", "0.0.0.0")
PORT = int(os.getenv("TODO_PORT", "8080"))
LOG_LEVEL = os.getenv("TODO_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once, before the first log call."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    ))
    root.addHandler(handler)
    root.setLevel(level)
