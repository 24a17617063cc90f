"""Allow ``python -m jeopardy_app`` to run the command-line front end."""

import sys

from jeopardy_app.cli import main

if __name__ == "__main__":
    sys.exit(main())
