"""Application entry point for the Jeopardy board editor."""

from __future__ import annotations

import sys

from jeopardy_app.cli import main


if __name__ == "__main__":
    sys.exit(main())
