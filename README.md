# procrastinate

A friendly neighbourhood to-do list that lives in your terminal. Lists and
tasks are kept in a SQLite database, so nothing is lost between runs.

## Installing

```
pip install .
```

## Running

```
procrastinate
```

The command takes no options besides `--help`. The database is written to
`instance/lists.db` under the directory you run the command from; the
`instance` directory is created if it does not exist yet.

## Using it

Everything is driven by numbered menus; type a number and press Enter.

From the main menu you can:

1. Create a new list
2. View your lists and pick one by its number (0 exits)
3. Exit

Inside a list you can:

1. Add a new task
2. View the tasks as a table of ID, task, progress and status, then go back
   to the main menu (1) or exit
3. Update the progress note of a task
4. Delete a task (asks for confirmation: 0 for yes, 1 for no)
5. Mark a task as completed (0 to confirm, 1 to go back)
6. Exit

When a list has no tasks yet, its menu only offers to create a task or exit.

New tasks start with progress `NA` and status `INCOMPLETE`. Completed tasks
can no longer have their progress updated or be marked again.

Typing something that is not a number at a menu prints `no funny business`
and shows the menu again. At the delete and mark confirmations, however, an
answer that is not a number ends the program with an error, as does reaching
the end of input while a list name, task name or progress note is asked for.
Reaching the end of input at a menu simply ends the session. On an error the
command prints `Error: ...` to standard error and exits with status 1.

## Using the store from Python

The storage layer in `procrastinate.store` can be used on its own:

```python
from procrastinate.store import Store, format_tasks

with Store.open() as store:          # uses ./instance/lists.db
    groceries = store.add_list("Groceries")
    task = store.add_task(groceries.id, "Buy milk")
    store.update_progress(task.id, "Found the shop")
    store.mark_complete(task.id)
    print(format_tasks(store.tasks(groceries.id)), end="")
```

- `Store(path)` opens (or creates) the database file at `path`;
  `Store.open(directory)` opens `instance/lists.db` under `directory`, the
  current directory by default, creating the folder if needed.
- `lists()` returns `TodoList` records and `tasks(list_id)` returns `Task`
  records, both in order of creation. `Task.is_complete()` tells whether a
  task has been marked as completed.
- `add_list` and `add_task` return the new record. `update_progress`,
  `delete_task` and `mark_complete` return whether a task was affected.
- `format_tasks(tasks)` renders tasks as a fixed-width table with a header.

The interactive menus are in `procrastinate.cli`: `Session(store, stdin,
stdout).run()` runs them on any text streams, and `main()` is what the
`procrastinate` command calls.

## What it does not do

Lists can be created but not renamed or deleted, and the database location
cannot be chosen from the command line; it is always `instance/lists.db`
under the current directory.

## Running the tests

```
pip install ".[test]"
pytest
```