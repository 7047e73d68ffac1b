import argparse
from pathlib import Path

import uvicorn

import storage
from config import get_settings


def use_tasks_file(path):
    """Points the store at another JSON file for this process."""
    if path:
        storage.TASKS_FILE = Path(path)


def init_store():
    """Creates the task store if it does not exist yet."""
    if storage.initialize_tasks_file():
        print(f"Created {storage.TASKS_FILE}.")
    else:
        print(f"{storage.TASKS_FILE} already exists.")


def list_tasks():
    """Prints every task in the store."""
    tasks = storage.read_tasks()
    if not tasks:
        print("No tasks.")
        return

    for task in tasks:
        line = f"- [{task.get('status', 'todo')}] {task.get('text', '')} ({task.get('id', 'N/A')})"
        if task.get("details"):
            line += f"\n    {task['details']}"
        print(line)


def serve(host, port):
    """Runs the API server."""
    from main import app
    uvicorn.run(app, host=host, port=port)


def main(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Manage and serve the todo task API.")
    parser.add_argument("--tasks-file", type=str, default=None,
                        help=f"Path to the JSON task store (default: {settings.tasks_file}).")
    subparsers = parser.add_subparsers(dest='command', required=True, help='Available commands')

    parser_serve = subparsers.add_parser('serve', help='Run the API server.')
    parser_serve.add_argument('--host', type=str, default=settings.host, help='Interface to bind.')
    parser_serve.add_argument('--port', type=int, default=settings.port, help='Port to listen on.')

    subparsers.add_parser('init', help='Create the task store if it is missing.')
    subparsers.add_parser('list', help='List the tasks in the store.')

    args = parser.parse_args(argv)
    use_tasks_file(args.tasks_file)

    if args.command == 'serve':
        serve(args.host, args.port)
    elif args.command == 'init':
        init_store()
    elif args.command == 'list':
        list_tasks()


if __name__ == "__main__":
    main()
