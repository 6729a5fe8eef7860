"""CLI entry point.

Allows running the CLI as a module: python -m papertime.cli
"""

from papertime.cli import app

if __name__ == "__main__":
    app()
