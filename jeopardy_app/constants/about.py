"""Static metadata describing the Jeopardy board editor."""

APP_NAME = "Jeopardy"
APP_VERSION = "0.1"
APP_DESCRIPTION = (
    "A platform for creating, storing, and running Jeopardy-like games. "
    "Build boards of categories and questions, keep score for players, "
    "and save everything to a human-readable .jpdy file."
)
APP_DISCLAIMER = "This project is not affiliated with JEOPARDY!"
