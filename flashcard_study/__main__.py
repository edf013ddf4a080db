"""Entry point for running flashcard_study as a module.

Usage:
    python -m flashcard_study <command> [options]
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
