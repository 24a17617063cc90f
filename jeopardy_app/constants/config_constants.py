"""Configuration keys and their built-in defaults."""

BORDER_COLOR_KEY: str = "JPDY_BORDER_COLOR"
DEFAULT_BORDER_COLOR: str = "#b31b1b"

DEFAULT_VALUES: dict[str, str] = {
    BORDER_COLOR_KEY: DEFAULT_BORDER_COLOR,
}
