"""Constants and configuration defaults for the visedit editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Line store
    MAX_LINES = 100  # Soft capacity; edits past it are silently ignored

    # Screen geometry used before the terminal reports its size
    DEFAULT_SCREEN_ROWS = 24  # Includes the status row
    DEFAULT_SCREEN_COLUMNS = 80
    STATUS_ROWS = 1  # Rows reserved at the bottom for the status line

    # Rendering
    EMPTY_ROW_MARKER = "~"  # Shown for rows past the end of the buffer

    # Input
    PRINTABLE_MIN = 32  # ' '
    PRINTABLE_MAX = 126  # '~'

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Status messages
    NORMAL_MODE_MESSAGE = "[Normal Mode]"
    VISUAL_MODE_MESSAGE = "[Visual Mode]"
    COPIED_MESSAGE = "[Copied {} chars]"
    CUT_MESSAGE = "[Cut {} chars]"
    DELETED_MESSAGE = "[Deleted {} chars]"
    PASTED_MESSAGE = "[Pasted {} chars]"
    SAVED_MESSAGE = "[Saved to {}]"
    RELOADED_MESSAGE = "[Reloaded {}]"
    SAVE_FAILED_MESSAGE = "Can't save! {}"
    RELOAD_FAILED_MESSAGE = "Can't reload! {}"
