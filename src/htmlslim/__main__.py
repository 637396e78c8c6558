"""Allow ``python -m htmlslim``."""

from htmlslim.cli import app

if __name__ == "__main__":
    app()
