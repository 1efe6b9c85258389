"""Visedit CLI entry point.

Allows running via `python -m visedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .settings import EditorSettings, default_log_path, load_settings
from .version import get_version_string

USAGE = "Usage: visedit [--max-lines N] <filename>"
LOG_ENV_VAR = "VISEDIT_LOG"


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging(settings: EditorSettings) -> Optional[Path]:
    """Send log records to a file, never to the editor's screen.

    Logging is enabled when VISEDIT_LOG names a file or a log level is
    configured; otherwise records are discarded.

    Returns:
        The log file path, or None if logging is disabled.
    """
    package_logger = logging.getLogger("visedit")
    log_file = os.environ.get(LOG_ENV_VAR)
    if not log_file and settings.log_level is None:
        package_logger.addHandler(logging.NullHandler())
        return None

    path = Path(log_file) if log_file else default_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level or logging.INFO)
    package_logger.propagate = False
    return path


def run_keyboard_test() -> None:
    """Run an interactive keyboard test using the editor's input stack.

    Prints how each key is decoded. Quit with Ctrl-Q.
    """
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    print("Keyboard test mode - press keys to see parsed events.\r")
    print("Quit with Ctrl-Q.\r")

    try:
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.CTRL and ev.value == 'q':
                break
            raw = _escape_bytes(ev.raw)
            print(f"type={ev.key_type.value} value={ev.value} raw='{raw}'\r")
    finally:
        term.cleanup()


def parse_max_lines(value: str) -> int:
    try:
        max_lines = int(value)
    except ValueError:
        max_lines = 0
    if max_lines <= 0:
        print(f"visedit: invalid --max-lines value: {value}", file=sys.stderr)
        sys.exit(1)
    return max_lines


def main(argv: Optional[list[str]] = None) -> None:
    # Very small arg parsing: version, keyboard test, capacity and the filename
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    max_lines = None
    if args and args[0] == '--max-lines':
        if len(args) < 2:
            print(USAGE, file=sys.stderr)
            sys.exit(1)
        max_lines = parse_max_lines(args[1])
        args = args[2:]
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    settings = load_settings()
    if max_lines is not None:
        settings.max_lines = max_lines
    configure_logging(settings)

    # Lazy import to avoid importing terminal deps for --version
    from .editor import Editor
    from .terminal import TerminalError
    editor = Editor(settings=settings)
    editor.load_file(args[0])
    try:
        editor.run()
    except TerminalError as e:
        print(f"visedit: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
