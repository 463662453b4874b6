# src/drawing_sink.py

"""
Drawing sink: the canvas capability the layout is drawn onto.

Any concrete canvas (the Graphviz renderer, an RPC stub to a host editor,
the in-memory RecordingSink used by tests) implements DrawingSink.
draw_commands() issues layout output to a sink in submission order.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from flowchart_models import DrawCommand, Rectangle, Text, Line


class DrawingError(Exception):
    """A sink rejected a draw command. Earlier commands stay drawn."""

    def __init__(self, message: str, index: int = -1, command=None):
        super().__init__(message)
        self.index = index
        self.command = command


class DrawingSink(ABC):

    @abstractmethod
    def create_rectangle(self, width, height, x, y, color_hex=None):
        ...

    @abstractmethod
    def create_text(
        self, text, x, y, font_size=None, color_hex=None, align=None, bold=False
    ):
        ...

    @abstractmethod
    def create_line(self, x1, y1, x2, y2, color_hex=None):
        ...

    @abstractmethod
    def get_canvas_width(self) -> float:
        ...

    @abstractmethod
    def get_canvas_height(self) -> float:
        ...


def issue_command(sink: DrawingSink, command: DrawCommand):
    """Dispatch one command to the matching sink primitive."""
    if isinstance(command, Rectangle):
        return sink.create_rectangle(
            command.width, command.height, command.x, command.y,
            color_hex=command.color_hex
        )
    if isinstance(command, Text):
        return sink.create_text(
            command.text, command.x, command.y,
            font_size=command.font_size, color_hex=command.color_hex,
            align=command.align, bold=command.bold
        )
    if isinstance(command, Line):
        return sink.create_line(
            command.x1, command.y1, command.x2, command.y2,
            color_hex=command.color_hex
        )
    raise TypeError(f"Unknown draw command: {command!r}")


def draw_commands(sink: DrawingSink, commands: Iterable[DrawCommand]) -> int:
    """
    Issue commands to the sink one at a time, in order.

    Returns:
        Number of commands issued.

    Raises:
        DrawingError: the sink failed on a command. No rollback of the
            commands issued before it.
    """
    issued = 0
    for command in commands:
        try:
            issue_command(sink, command)
        except Exception as e:
            raise DrawingError(
                f"{type(command).__name__} #{issued} rejected: {e}",
                index=issued, command=command
            ) from e
        issued += 1
    return issued


class RecordingSink(DrawingSink):
    """
    In-memory sink that keeps every issued command.

    fail_after: when set, the sink raises on every command after that
    many have been accepted.
    """

    def __init__(self, width: float = 800, height: float = 600,
                 fail_after: Optional[int] = None):
        self.width = width
        self.height = height
        self.fail_after = fail_after
        self.commands: List[DrawCommand] = []

    def _accept(self, command: DrawCommand):
        if self.fail_after is not None and len(self.commands) >= self.fail_after:
            raise RuntimeError("canvas rejected the command")
        self.commands.append(command)

    def create_rectangle(self, width, height, x, y, color_hex=None):
        self._accept(Rectangle(width, height, x, y, color_hex))

    def create_text(
        self, text, x, y, font_size=None, color_hex=None, align=None, bold=False
    ):
        self._accept(Text(text, x, y, font_size, color_hex, align, bold))

    def create_line(self, x1, y1, x2, y2, color_hex=None):
        self._accept(Line(x1, y1, x2, y2, color_hex))

    def get_canvas_width(self) -> float:
        return self.width

    def get_canvas_height(self) -> float:
        return self.height
