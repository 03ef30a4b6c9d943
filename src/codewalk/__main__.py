"""Allow ``python -m codewalk``."""

from codewalk.cli import run

if __name__ == "__main__":
    run()
