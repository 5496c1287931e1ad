from dataclasses import dataclass, field

from gerberkit.commands import Command, arc, begin_line, flash, line, stroke
from gerberkit.strokes import Segment, StrokesToFillsConverter


@dataclass
class _Level:
    render_commands: list = field(default_factory=list)

    def add(self, command):
        self.render_commands.append(command)


def _begin(x, y):
    command = begin_line(x, y)
    command.end_x, command.end_y = x, y
    return command


def _line(x, y):
    command = line(x, y)
    command.end_x, command.end_y = x, y
    return command


def _arc(cx, cy, angle, ex, ey):
    command = arc(cx, cy, angle)
    command.end_x, command.end_y = ex, ey
    return command


def _kinds(commands):
    return [c.command for c in commands]


def test_segment_closed_when_end_meets_start():
    segment = Segment()
    for command in (_begin(0, 0), _line(1, 0), _line(0, 0)):
        segment.add(command)
    assert segment.is_closed() is True


def test_segment_open_and_empty():
    assert Segment().is_closed() is False
    segment = Segment()
    segment.add(_begin(0, 0))
    segment.add(_line(1, 0))
    assert segment.is_closed() is False


def test_reverse_open_segment():
    segment = Segment([_begin(0, 0), _line(1, 0), _line(1, 1)])
    segment.reverse()
    start = segment.commands[0]
    assert (start.x, start.y) == (1, 1)
    assert [(c.end_x, c.end_y) for c in segment.commands[1:]] == [(1, 0), (0, 0)]
    assert [(c.x, c.y) for c in segment.commands[1:]] == [(1, 0), (0, 0)]


def test_reverse_negates_arc_angle():
    segment = Segment([_begin(1, 0), _arc(0, 0, 90.0, 0, 1)])
    segment.reverse()
    assert segment.commands[1].a == -90.0
    assert (segment.commands[1].end_x, segment.commands[1].end_y) == (1, 0)
    assert (segment.commands[0].x, segment.commands[0].y) == (0, 1)


def test_reverse_leaves_closed_loop():
    commands = [_begin(0, 0), _line(1, 0), _line(0, 0)]
    segment = Segment(list(commands))
    segment.reverse()
    assert segment.commands == commands
    assert (segment.commands[0].x, segment.commands[0].y) == (0, 0)


def test_extract_drops_strokes_and_flashes():
    level = _Level([_begin(0, 0), _line(1, 0), stroke(), flash(2, 2)])
    converter = StrokesToFillsConverter(level)
    converter.extract_segments()
    assert level.render_commands == []
    assert len(converter.segments) == 1
    assert _kinds(converter.segments[0].commands) == [Command.BEGIN_LINE, Command.LINE]


def test_join_consecutive_segments():
    level = _Level([_begin(0, 0), _line(1, 0), stroke(), _begin(1, 0), _line(1, 1), stroke()])
    converter = StrokesToFillsConverter(level)
    converter.extract_segments()
    converter.join_segments()
    assert len(converter.segments) == 1
    ends = [(c.end_x, c.end_y) for c in converter.segments[0].commands]
    assert ends[-1] == (1, 1)
    assert len(ends) == 3


def test_join_reverses_candidate_with_same_end():
    level = _Level([_begin(0, 0), _line(1, 0), _begin(2, 0), _line(1, 0)])
    converter = StrokesToFillsConverter(level)
    converter.extract_segments()
    converter.join_segments()
    assert len(converter.segments) == 1
    last = converter.segments[0].commands[-1]
    assert (last.end_x, last.end_y) == (2, 0)


def test_join_near_segments():
    level = _Level([_begin(0, 0), _line(1, 0), _begin(1.0005, 0), _line(2, 0)])
    converter = StrokesToFillsConverter(level)
    converter.extract_segments()
    converter.join_segments()
    assert len(converter.segments) == 1
    assert converter.segments[0].commands[-1].end_x == 2


def test_find_neighbour_none_for_closed():
    level = _Level([_begin(0, 0), _line(1, 0), _line(0, 0), _begin(0, 0), _line(5, 5)])
    converter = StrokesToFillsConverter(level)
    converter.extract_segments()
    assert converter.find_neighbour(converter.segments[0]) is None


def test_convert_open_path_gets_closed():
    level = _Level([_begin(0, 0), _line(1, 0), stroke(), _begin(1, 0), _line(1, 1), stroke()])
    StrokesToFillsConverter(level).convert()
    assert _kinds(level.render_commands) == [
        Command.BEGIN_OUTLINE,
        Command.BEGIN_LINE,
        Command.LINE,
        Command.LINE,
        Command.CLOSE,
        Command.FILL,
        Command.END_OUTLINE,
    ]


def test_convert_closed_path_needs_no_close():
    level = _Level([_begin(0, 0), _line(1, 0), _line(0, 0), stroke()])
    StrokesToFillsConverter(level).convert()
    assert _kinds(level.render_commands) == [
        Command.BEGIN_OUTLINE,
        Command.BEGIN_LINE,
        Command.LINE,
        Command.LINE,
        Command.FILL,
        Command.END_OUTLINE,
    ]


def test_convert_without_paths_leaves_nothing():
    level = _Level([flash(1, 1), stroke()])
    StrokesToFillsConverter(level).convert()
    assert level.render_commands == []