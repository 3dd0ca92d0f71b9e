"""Allow running landed with ``python -m landed``."""

from landed.cli import app

if __name__ == "__main__":
    app()
