"""Board and file-format constants shared across core layers."""

BOARD_FILE_EXTENSION: str = ".jpdy"
BOARD_SCHEMA_VERSION: int = 1
BOARD_JSON_INDENT: int = 4

# Extra row each category renders above its questions.
CATEGORY_HEADER_ROWS: int = 1

NULL_PLAYER_LABEL: str = "Null Player"

# Upper bound on follow-up notification passes queued by re-entrant observers.
MAX_NOTIFY_PASSES: int = 16
