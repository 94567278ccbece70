"""Constants and configuration defaults for the pound viewer."""

VERSION = "3.0.0"


class ViewerConstants:
    """Central configuration constants for the viewer."""

    # Line rendering
    TAB_STOP = 8  # Tabs pad to the next multiple of this column

    # Screen drawing
    EMPTY_ROW_MARKER = "~"  # Drawn on rows past the end of the document
    WELCOME_MESSAGE = "Pound Editor --- Version {}"
    MIN_SCREEN_COLUMNS = 1
    MIN_SCREEN_ROWS = 1

    # Input timing
    POLL_TIMEOUT = 0.5  # Seconds to wait for a key before looping again

    # Config limits
    MIN_TAB_STOP = 1
    MAX_TAB_STOP = 32
    MIN_POLL_TIMEOUT = 0.01
    MAX_POLL_TIMEOUT = 5.0
    DEFAULT_LOG_LEVEL = "WARNING"

    @classmethod
    def welcome_message(cls) -> str:
        return cls.WELCOME_MESSAGE.format(VERSION)
