"""Command pattern implementation for viewer actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .cursor import Direction
from .keyboard import KeyType

if TYPE_CHECKING:
    from .viewer import Viewer
    from .keyboard import KeyEvent


class ViewerCommand(ABC):
    """Base class for viewer commands."""

    @abstractmethod
    def execute(self, viewer: 'Viewer', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            viewer: Viewer instance
            key_event: The key event that triggered this command

        Returns:
            True if the screen needs to be redrawn
        """


class MoveCommand(ViewerCommand):
    """Single-step cursor movement."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, viewer: 'Viewer', key_event: 'KeyEvent') -> bool:
        viewer.controller.move(self.direction, viewer.document)
        return True


class PageCommand(ViewerCommand):
    """Move a screenful up or down."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, viewer: 'Viewer', key_event: 'KeyEvent') -> bool:
        viewer.controller.page_move(self.direction, viewer.document)
        return True


class QuitCommand(ViewerCommand):
    def execute(self, viewer, key_event):
        viewer.running = False
        return False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], ViewerCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'up'), MoveCommand(Direction.UP))
        self.register((KeyType.SPECIAL, 'down'), MoveCommand(Direction.DOWN))
        self.register((KeyType.SPECIAL, 'left'), MoveCommand(Direction.LEFT))
        self.register((KeyType.SPECIAL, 'right'), MoveCommand(Direction.RIGHT))
        self.register((KeyType.SPECIAL, 'home'), MoveCommand(Direction.HOME))
        self.register((KeyType.SPECIAL, 'end'), MoveCommand(Direction.END))

        # Paging
        self.register((KeyType.SPECIAL, 'page_up'), PageCommand(Direction.PAGE_UP))
        self.register((KeyType.SPECIAL, 'page_down'), PageCommand(Direction.PAGE_DOWN))

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: ViewerCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[ViewerCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, viewer: 'Viewer', key_event: 'KeyEvent') -> bool:
        """Execute the command bound to the key event, if any.

        Only unmodified special keys and exact Ctrl combinations are bound;
        e.g. Ctrl-Alt-q does not quit and Shift-Left does not move.

        Returns:
            True if the screen needs to be redrawn
        """
        if key_event.is_alt or key_event.is_shift:
            return False
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        return command.execute(viewer, key_event)
