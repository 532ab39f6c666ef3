"""Allow ``python -m todo_scanner`` to behave like the CLI entry point."""

from .cli import run

if __name__ == "__main__":  # pragma: no cover
    run()
