"""Module entry point for running with python -m wikiterm."""

from wikiterm.cli import run

if __name__ == "__main__":
    run()
