"""Entry point for ``python -m dropx``."""

from dropx.cli.commands import app

if __name__ == "__main__":
    app()
