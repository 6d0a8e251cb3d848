"""Allow ``python -m ktx``."""

from ktx.cli import run

if __name__ == "__main__":
    run()
