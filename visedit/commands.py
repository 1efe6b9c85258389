"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .constants import EditorConstants
from .keyboard import KeyType
from .model import Direction
from .selection import Mode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Moves the cursor; in visual mode this extends the selection."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.model.move_cursor(self.direction)
        return False


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return self._edit(editor, key_event)

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Perform the edit and report whether anything changed."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.delete_char()
        return True


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.insert_newline()
        return True


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        char = key_event.value
        # Only single printable ASCII characters are inserted
        if len(char) != 1:
            return False
        if not EditorConstants.PRINTABLE_MIN <= ord(char) <= EditorConstants.PRINTABLE_MAX:
            return False
        editor.model.insert_char(char)
        return True


class PasteCommand(EditCommand):
    def _edit(self, editor, key_event):
        count = editor.model.paste()
        editor.status_message = EditorConstants.PASTED_MESSAGE.format(count)
        return count > 0


class CutSelectionCommand(EditCommand):
    def _edit(self, editor, key_event):
        count = editor.model.cut_selection()
        editor.status_message = EditorConstants.CUT_MESSAGE.format(count)
        return count > 0


class DeleteSelectionCommand(EditCommand):
    def _edit(self, editor, key_event):
        count = editor.model.delete_selection()
        editor.status_message = EditorConstants.DELETED_MESSAGE.format(count)
        return count > 0


class SystemCommand(EditorCommand):
    """Base class for commands that leave the document text alone."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class CopySelectionCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        count = editor.model.copy_selection()
        editor.status_message = EditorConstants.COPIED_MESSAGE.format(count)


class EnterVisualModeCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        if editor.model.enter_visual_mode():
            editor.status_message = EditorConstants.VISUAL_MODE_MESSAGE


class CancelCommand(SystemCommand):
    """Escape: drop any selection and return to normal mode."""
    def _execute_system(self, editor, key_event):
        editor.model.exit_visual_mode()
        editor.status_message = EditorConstants.NORMAL_MODE_MESSAGE


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        # Quitting never saves; Ctrl-S is the only way to persist edits
        editor.running = False


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.save()


class ReloadCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.reload()


class CommandRegistry:
    """Maps key combinations to commands, separately for each mode."""

    def __init__(self):
        self._commands: Dict[Mode, Dict[Tuple[KeyType, str], EditorCommand]] = {
            mode: {} for mode in Mode
        }
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Available in every mode
        self.register(None, (KeyType.SPECIAL, 'escape'), CancelCommand())
        self.register(None, (KeyType.CTRL, 'q'), QuitCommand())

        # Movement; in visual mode it moves the live end of the selection
        self.register(None, (KeyType.SPECIAL, 'left'), MovementCommand(Direction.LEFT))
        self.register(None, (KeyType.SPECIAL, 'right'), MovementCommand(Direction.RIGHT))
        self.register(None, (KeyType.SPECIAL, 'up'), MovementCommand(Direction.UP))
        self.register(None, (KeyType.SPECIAL, 'down'), MovementCommand(Direction.DOWN))

        # Normal mode
        self.register(Mode.NORMAL, (KeyType.CTRL, 's'), SaveCommand())
        self.register(Mode.NORMAL, (KeyType.CTRL, 'o'), ReloadCommand())
        self.register(Mode.NORMAL, (KeyType.CTRL, 'v'), EnterVisualModeCommand())
        self.register(Mode.NORMAL, (KeyType.REGULAR, 'v'), EnterVisualModeCommand())
        self.register(Mode.NORMAL, (KeyType.REGULAR, 'p'), PasteCommand())
        self.register(Mode.NORMAL, (KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register(Mode.NORMAL, (KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # Visual mode
        self.register(Mode.VISUAL, (KeyType.REGULAR, 'y'), CopySelectionCommand())
        self.register(Mode.VISUAL, (KeyType.REGULAR, 'c'), CutSelectionCommand())
        self.register(Mode.VISUAL, (KeyType.REGULAR, 'd'), DeleteSelectionCommand())

    def register(self, mode: Optional[Mode], key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination; mode None means every mode."""
        modes = list(Mode) if mode is None else [mode]
        for m in modes:
            self._commands[m][key] = command

    def get_command(self, mode: Mode, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination in the given mode."""
        return self._commands[mode].get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Unbound keys insert text in normal mode and are ignored
        otherwise.

        Returns:
            True if the document was modified
        """
        mode = editor.model.mode
        command = self.get_command(mode, key_event.key_type, key_event.value)

        if command:
            return command.execute(editor, key_event)

        if mode is Mode.NORMAL and key_event.key_type == KeyType.REGULAR:
            return InsertTextCommand().execute(editor, key_event)

        return False
