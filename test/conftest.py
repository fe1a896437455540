import pytest
from fastapi.testclient import TestClient

from list_storage import TaskList
from main import create_app
from storage import TaskStore


# This fixture will be automatically used by every test.
@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """
    Runs each test inside its own temporary directory so the default
    tasks.json and List.json never leak between tests.
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def tasks_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_file):
    task_store = TaskStore(tasks_file)
    task_store.load()
    return task_store


@pytest.fixture
def client(store):
    # Entering the client runs the lifespan hook, which loads the store.
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def task_list(tmp_path):
    return TaskList(tmp_path / "List.json")
