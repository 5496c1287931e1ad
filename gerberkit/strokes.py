"""Joining stroked paths of a level into filled outlines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from gerberkit.commands import (
    Command,
    RenderCommand,
    begin_outline,
    close,
    end_outline,
    fill,
)

logger = logging.getLogger(__name__)

_NEAR = 1e-3
"""Ends closer than this (in mm) are treated as the same point."""


class _Level(Protocol):
    render_commands: list[RenderCommand]

    def add(self, command: RenderCommand) -> None: ...


@dataclass(eq=False)
class Segment:
    """A connected run of line and arc commands starting with a begin-line."""

    commands: list[RenderCommand] = field(default_factory=list)
    _closed: bool = field(default=False, init=False, repr=False)

    def add(self, command: RenderCommand) -> None:
        self._closed = False
        self.commands.append(command)

    def is_closed(self) -> bool:
        """True when the last command ends where the first one starts."""
        if self._closed:
            return True
        if not self.commands:
            return False
        first, last = self.commands[0], self.commands[-1]
        if last.end_x == first.x and last.end_y == first.y:
            self._closed = True
        return self._closed

    def reverse(self) -> None:
        """Run the segment the other way round; closed loops are left alone."""
        if self.is_closed() or not self.commands:
            return

        start, *rest = self.commands
        x, y = start.x, start.y
        reversed_commands: list[RenderCommand] = []
        for command in rest:
            if command.command is Command.LINE:
                command.x, command.y = x, y
            elif command.command is Command.ARC:
                command.a = -command.a
            else:
                continue
            x, command.end_x = command.end_x, x
            y, command.end_y = command.end_y, y
            reversed_commands.insert(0, command)

        start.x, start.y = x, y
        self.commands = [start, *reversed_commands]

    @property
    def _end(self) -> tuple[float, float]:
        last = self.commands[-1]
        return last.end_x, last.end_y

    @property
    def _start(self) -> tuple[float, float]:
        first = self.commands[0]
        return first.x, first.y


class StrokesToFillsConverter:
    """Rewrites a level's stroked paths as one filled outline."""

    def __init__(self, level: _Level) -> None:
        self.level = level
        self.segments: list[Segment] = []

    def _joinable(self, segment: Segment) -> bool:
        return bool(segment.commands) and not segment.is_closed()

    def extract_segments(self) -> None:
        """Move path commands into segments, keeping outline commands in the level."""
        old_commands = self.level.render_commands
        self.level.render_commands = []

        is_outline = False
        for command in old_commands:
            kind = command.command
            if kind in (Command.BEGIN_LINE, Command.LINE, Command.ARC):
                if is_outline:
                    self.level.add(command)
                else:
                    if kind is Command.BEGIN_LINE or not self.segments:
                        self.segments.append(Segment())
                    self.segments[-1].add(command)
            elif kind in (Command.CLOSE, Command.FILL):
                self.level.add(command)
            elif kind is Command.BEGIN_OUTLINE:
                is_outline = True
                self.level.add(command)
            elif kind is Command.END_OUTLINE:
                is_outline = False
                self.level.add(command)

    def find_neighbour(self, current: Segment) -> Segment | None:
        """Find an open segment that continues ``current``, reversing it if needed."""
        if not self._joinable(current):
            return None

        candidates = [s for s in self.segments if s is not current and self._joinable(s)]
        end = current._end

        for candidate in candidates:
            if not self._joinable(candidate):
                continue
            if end == candidate._start:
                return candidate
            if end == candidate._end:
                candidate.reverse()
                return candidate

        # Many generators leave rounding errors, so try again with a tolerance.
        for candidate in candidates:
            if not self._joinable(candidate):
                continue
            dx = abs(end[0] - candidate._start[0])
            dy = abs(end[1] - candidate._start[1])
            if dx < _NEAR and dy < _NEAR:
                logger.warning(
                    "Strokes2Fills - Warning: Joining segments that are close, but not coincident"
                )
                return candidate
            dx = abs(end[0] - candidate._end[0])
            dy = abs(end[1] - candidate._end[1])
            if dx < _NEAR and dy < _NEAR:
                candidate.reverse()
                logger.warning(
                    "Strokes2Fills - Warning: Joining segments that are close, but not "
                    "coincident: dX = %g mm (%g mil), dY = %g mm (%g mil)",
                    dx,
                    dx / 25.4e-3,
                    dy,
                    dy / 25.4e-3,
                )
                return candidate
        return None

    def join_segments(self) -> None:
        """Append each segment's neighbours to it until none are left."""
        index = 0
        while index < len(self.segments):
            current = self.segments[index]
            neighbour = self.find_neighbour(current)
            if neighbour is None:
                index += 1
                continue
            position = next(i for i, s in enumerate(self.segments) if s is neighbour)
            del self.segments[position]
            if position < index:
                index -= 1
            current.commands.extend(neighbour.commands[1:])

    def add_segments(self) -> None:
        """Write the segments back into the level as one filled outline."""
        if not self.segments:
            return

        self.level.add(begin_outline())
        for segment in self.segments:
            self.level.render_commands.extend(segment.commands)
            if not segment.is_closed():
                self.level.add(close())
        self.segments = []

        self.level.add(fill())
        self.level.add(end_outline())

    def convert(self) -> None:
        """Extract, join and write back the level's strokes."""
        self.extract_segments()
        self.join_segments()
        self.add_segments()