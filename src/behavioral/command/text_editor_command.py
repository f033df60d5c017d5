from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

__all__ = [
    "TextBufferError",
    "BufferRangeError",
    "CommandNotExecutedError",
    "CommandAlreadyLoggedError",
    "TextBuffer",
    "Command",
    "InsertCommand",
    "DeleteCommand",
    "ReplaceCommand",
    "CommandHistory",
    "main",
]


# ==========================
# Module: text_editor_command
# Purpose: Encapsulate position-addressed text edits as Commands with Undo,
#          a composite Replace (macro) command, batch execution and a
#          permanent command log kept apart from the undo stack.
# ==========================


# ---------- Errors ----------

class TextBufferError(RuntimeError):
    """
    Base error for invalid text buffer operations.
    """


class BufferRangeError(TextBufferError, IndexError):
    """
    Raised when a position or length falls outside the buffer.
    """


class CommandNotExecutedError(RuntimeError):
    """
    Raised when a command is reverted without having been applied first.
    """


class CommandAlreadyLoggedError(RuntimeError):
    """
    Raised when a command object is handed to the history a second time.
    """


# ---------- Receiver ----------

@dataclass
class TextBuffer:
    """
    Text receiver holding a single mutable string.

    :param content: Initial text.
    """
    content: str = ""

    def __len__(self) -> int:
        return len(self.content)

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= len(self.content):
            raise BufferRangeError(
                f"Position {position} outside buffer of length {len(self.content)}."
            )

    def insert(self, text: str, position: Optional[int] = None) -> None:
        """
        Inserts `text` at `position`.

        :param text: Text to insert.
        :param position: Target position; defaults to the end of the content.
        :raises BufferRangeError: If position is outside [0, len(content)].
        """
        if position is None:
            position = len(self.content)
        self._check_position(position)
        self.content = self.content[:position] + text + self.content[position:]
        logger.info("[Editor] Inserted '%s' at position %d", text, position)
        logger.info("[Editor] Current text: '%s'", self.content)

    def delete(self, position: int, length: int) -> str:
        """
        Deletes up to `length` characters starting at `position`.

        A range running past the end is clamped to the available text.

        :param position: Start position.
        :param length: Number of characters to delete; must be >= 0.
        :return: The deleted substring (for undo).
        :raises BufferRangeError: If position is outside the buffer or length is negative.
        """
        self._check_position(position)
        if length < 0:
            raise BufferRangeError(f"Length must be non-negative, got {length}.")
        deleted = self.content[position: position + length]
        self.content = self.content[:position] + self.content[position + length:]
        logger.info("[Editor] Deleted '%s' at position %d", deleted, position)
        logger.info("[Editor] Current text: '%s'", self.content)
        return deleted

    def get_text(self) -> str:
        """
        :return: Current content.
        """
        return self.content


# ---------- Commands ----------

class Command(ABC):
    """
    Base interface for reversible edits bound to a TextBuffer.

    :param buffer: Receiver the command operates on (not owned).
    :param description: Human-readable description of the command.
    """

    name = "Command"

    def __init__(self, buffer: TextBuffer, description: str) -> None:
        self._buffer = buffer
        self._description = description
        self._executed = False

    @property
    def description(self) -> str:
        """
        :return: Command description string.
        """
        return self._description

    @property
    def executed(self) -> bool:
        """
        :return: True if the command has been applied and not reverted since.
        """
        return self._executed

    def _require_executed(self) -> None:
        if not self._executed:
            raise CommandNotExecutedError(f"Cannot revert '{self._description}' before it was applied.")

    @abstractmethod
    def apply(self) -> None:
        """
        Performs the forward action against the buffer.
        """

    @abstractmethod
    def revert(self) -> None:
        """
        Reverts the effects of apply().

        :raises CommandNotExecutedError: If apply() has not run.
        """


class InsertCommand(Command):
    """
    Inserts text at a fixed position.

    :param buffer: Target buffer.
    :param text: Text to insert.
    :param position: Insert position; defaults to the buffer length at construction time.
    """

    name = "Insert"

    def __init__(self, buffer: TextBuffer, text: str, position: Optional[int] = None) -> None:
        if position is None:
            position = len(buffer)
        super().__init__(buffer, description=f"Insert '{text}' at {position}")
        self._text = text
        self._position = position

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._position

    def apply(self) -> None:
        logger.info("[Command] Executing INSERT")
        self._buffer.insert(self._text, self._position)
        self._executed = True

    def revert(self) -> None:
        self._require_executed()
        logger.info("[Command] Undoing INSERT")
        self._buffer.delete(self._position, len(self._text))
        self._executed = False


class DeleteCommand(Command):
    """
    Deletes `length` characters at `position`, remembering the removed text.

    :param buffer: Target buffer.
    :param position: Start position.
    :param length: Number of characters to delete.
    """

    name = "Delete"

    def __init__(self, buffer: TextBuffer, position: int, length: int) -> None:
        super().__init__(buffer, description=f"Delete {length} chars at {position}")
        self._position = position
        self._length = length
        self._deleted_text: Optional[str] = None

    @property
    def position(self) -> int:
        return self._position

    @property
    def length(self) -> int:
        return self._length

    @property
    def deleted_text(self) -> Optional[str]:
        """
        :return: Text removed by the last apply(); None before the first apply().
        """
        return self._deleted_text

    def apply(self) -> None:
        logger.info("[Command] Executing DELETE")
        self._deleted_text = self._buffer.delete(self._position, self._length)
        self._executed = True

    def revert(self) -> None:
        self._require_executed()
        if self._deleted_text is None:
            raise CommandNotExecutedError(f"No deleted text recorded for '{self._description}'.")
        logger.info("[Command] Undoing DELETE")
        self._buffer.insert(self._deleted_text, self._position)
        self._executed = False


class ReplaceCommand(Command):
    """
    Macro command replacing `length` characters at `position` with `new_text`.

    Composed of a DeleteCommand and an InsertCommand anchored at the same
    position. Apply runs delete then insert; revert runs them in reverse.

    :param buffer: Target buffer.
    :param position: Start position of the replaced range.
    :param length: Number of characters to replace.
    :param new_text: Replacement text.
    """

    name = "Replace"

    def __init__(self, buffer: TextBuffer, position: int, length: int, new_text: str) -> None:
        super().__init__(buffer, description=f"Replace {length} chars at {position} with '{new_text}'")
        self._delete = DeleteCommand(buffer, position, length)
        self._insert = InsertCommand(buffer, new_text, position)

    @property
    def parts(self) -> Tuple[DeleteCommand, InsertCommand]:
        """
        :return: Sub-commands in apply order.
        """
        return self._delete, self._insert

    def apply(self) -> None:
        logger.info("[Command] Executing REPLACE (macro)")
        self._delete.apply()
        self._insert.apply()
        self._executed = True

    def revert(self) -> None:
        self._require_executed()
        logger.info("[Command] Undoing REPLACE (macro)")
        self._insert.revert()
        try:
            self._delete.revert()
        except BaseException:
            # Put the new text back so the composite stays fully applied.
            self._insert.apply()
            raise
        self._executed = False


# ---------- Invoker ----------

class CommandHistory:
    """
    Executes commands, keeps a permanent log and an undo stack.

    Undo pops from the stack only; the log keeps every command ever executed.
    There is no redo.
    """

    def __init__(self) -> None:
        self._log: List[Command] = []
        self._undo_stack: List[Command] = []

    @property
    def log(self) -> Tuple[Command, ...]:
        """
        :return: All executed commands in execution order.
        """
        return tuple(self._log)

    @property
    def undo_stack(self) -> Tuple[Command, ...]:
        """
        :return: Commands eligible for undo, oldest first.
        """
        return tuple(self._undo_stack)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def execute_command(self, cmd: Command) -> None:
        """
        Applies a command and records it in the log and on the undo stack.

        Each command object is logged once; handing the same object over again
        (even after it was undone) is rejected.

        :param cmd: Command to execute.
        :raises CommandAlreadyLoggedError: If cmd was executed through this history before.
        """
        if any(logged is cmd for logged in self._log):
            raise CommandAlreadyLoggedError(f"'{cmd.description}' is already in the history log.")
        cmd.apply()
        self._log.append(cmd)
        self._undo_stack.append(cmd)
        logger.debug("Recorded '%s' (log=%d, undo=%d)",
                     cmd.description, len(self._log), len(self._undo_stack))

    def execute_batch(self, cmds: Iterable[Command]) -> None:
        """
        Executes commands one by one in the given order.

        Not atomic: if a command fails, the ones before it stay applied and recorded.

        :param cmds: Ordered commands to execute.
        """
        items = list(cmds)
        logger.info("[Invoker] Executing batch of %d commands", len(items))
        for cmd in items:
            self.execute_command(cmd)

    def undo(self) -> bool:
        """
        Reverts the most recently executed command still on the undo stack.

        :return: True if a command was reverted; False if there was nothing to undo.
        :raises Exception: Whatever revert() raises; the command then stays on the undo stack.
        """
        if not self._undo_stack:
            logger.info("[Invoker] Nothing to undo!")
            return False
        cmd = self._undo_stack[-1]
        cmd.revert()
        self._undo_stack.pop()
        return True

    def show_history(self) -> List[str]:
        """
        Lists the logged commands by variant name, numbered from 1.

        :return: Lines such as "1. Insert".
        """
        lines = [f"{i}. {cmd.name}" for i, cmd in enumerate(self._log, start=1)]
        logger.info("[Invoker] Command History:")
        for line in lines:
            logger.info("  %s", line)
        return lines


# ---------- Demonstration ----------

def main() -> TextBuffer:
    """
    Runs the text editor walkthrough and returns the final buffer.
    """
    logger.info("=" * 70)
    logger.info("COMMAND PATTERN DEMONSTRATION - Text Editor")
    logger.info("=" * 70)

    editor = TextBuffer()
    history = CommandHistory()

    logger.info("### SCENARIO 1: Basic Commands ###")
    history.execute_command(InsertCommand(editor, "Hello"))
    history.execute_command(InsertCommand(editor, " World"))
    history.execute_command(InsertCommand(editor, "!"))

    logger.info("### SCENARIO 2: Undo Operations ###")
    history.undo()
    history.undo()

    logger.info("### SCENARIO 3: Macro Command (Replace) ###")
    history.execute_command(ReplaceCommand(editor, 0, 5, "Greetings"))

    logger.info("### SCENARIO 4: Batch Execution (Queue) ###")
    # All three are built before any runs, so they share position 9.
    history.execute_batch([
        InsertCommand(editor, " to"),
        InsertCommand(editor, " all"),
        InsertCommand(editor, "!"),
    ])

    logger.info("### SCENARIO 5: Multiple Undos ###")
    history.undo()
    history.undo()

    logger.info("### SCENARIO 6: Command History ###")
    history.show_history()

    logger.info("### Final State ###")
    logger.info("[Editor] Text: '%s'", editor.get_text())
    return editor


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    main()
