import io

import pytest

from procrastinate.cli import Session, main
from procrastinate.store import BadInputError, Store


@pytest.fixture
def store():
    with Store(":memory:") as db:
        yield db


def run(store, text):
    out = io.StringIO()
    Session(store, io.StringIO(text), out).run()
    return out.getvalue()


@pytest.fixture
def populated(store):
    lst = store.add_list("groceries")
    store.add_task(lst.id, "milk")
    return store, lst


def test_exit_without_lists(store):
    output = run(store, "2\n")
    assert "You do not have any lists, create one now!" in output
    assert output.rstrip().endswith("thanks for your time")
    assert store.lists() == []


def test_create_list_then_exit(store):
    output = run(store, "1\ngroceries\n3\n")
    assert [lst.name for lst in store.lists()] == ["groceries"]
    assert "succesfully added list groceries" in output


def test_bad_menu_input(store):
    output = run(store, "abc\n2\n")
    assert "no funny business" in output
    assert "thanks for your time" in output


def test_end_of_input_ends_session(store):
    output = run(store, "")
    assert output.startswith("Hello, world!\n")


def test_add_task_to_empty_list(store):
    lst = store.add_list("groceries")
    output = run(store, "2\n1\n1\nmilk\n6\n")
    assert [t.name for t in store.tasks(lst.id)] == ["milk"]
    assert "01 : groceries " in output
    assert "This list has no tasks, add one now!" in output


def test_unknown_list_number(store):
    store.add_list("groceries")
    output = run(store, "2\n7\n3\n")
    assert "doesn't exist pal" in output


def test_mark_task_complete(populated):
    store, lst = populated
    output = run(store, "2\n1\n5\n1\n0\n6\n")
    (task,) = store.tasks(lst.id)
    assert task.is_complete()
    assert "Marked as complete" in output


def test_mark_already_complete(populated):
    store, lst = populated
    store.mark_complete(store.tasks(lst.id)[0].id)
    output = run(store, "2\n1\n5\n1\n6\n")
    assert "You've already completed that" in output


def test_update_progress(populated):
    store, lst = populated
    output = run(store, "2\n1\n3\n1\nhalf done\n6\n")
    assert store.tasks(lst.id)[0].progress == "half done"
    assert "Current Progress: NA" in output


def test_update_refused_when_complete(populated):
    store, lst = populated
    store.mark_complete(store.tasks(lst.id)[0].id)
    run(store, "2\n1\n3\n1\n6\n")
    assert store.tasks(lst.id)[0].progress == "NA"


def test_delete_task(populated):
    store, lst = populated
    output = run(store, "2\n1\n4\n1\n0\n2\n")
    assert store.tasks(lst.id) == []
    assert "Deleted task successfuly" in output


def test_delete_declined(populated):
    store, lst = populated
    run(store, "2\n1\n4\n1\n1\n6\n")
    assert [t.name for t in store.tasks(lst.id)] == ["milk"]


def test_delete_bad_confirmation_raises(populated):
    store, _ = populated
    with pytest.raises(BadInputError):
        run(store, "2\n1\n4\n1\nmaybe\n")


def test_missing_task_number(populated):
    store, _ = populated
    output = run(store, "2\n1\n5\n42\n6\n")
    assert "doesn't exist mate" in output


def test_view_tasks_and_go_back(populated):
    store, _ = populated
    output = run(store, "2\n1\n2\n1\n3\n")
    assert output.count("Here are your lists") == 1
    assert output.count("1.Create new list\t2.View list\t3.Exit") == 2
    assert "milk" in output


def test_prompt_new_list_at_end_of_input(store):
    session = Session(store, io.StringIO(""), io.StringIO())
    with pytest.raises(BadInputError):
        session.prompt_new_list()
    assert store.lists() == []


def test_main_uses_instance_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nchores\n3\n"))
    assert main([]) == 0
    assert "succesfully added list chores" in capsys.readouterr().out
    with Store.open(tmp_path) as db:
        assert [lst.name for lst in db.lists()] == ["chores"]


def test_main_reports_bad_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 1
    assert "bad input" in capsys.readouterr().err