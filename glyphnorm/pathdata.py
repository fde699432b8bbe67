from typing import List, Optional

from .command_defs import PathCommand, commands_from_group, tokenize
from .subpath import Point, Subpath


def parse_commands(path_data: str) -> List[PathCommand]:
    """Tokenize path data into single-pair commands, relative ones kept as written."""
    commands: List[PathCommand] = []
    for command, numbers in tokenize(path_data):
        commands.extend(commands_from_group(command, numbers))
    return commands


def parse_path_data(path_data: str) -> List[Subpath]:
    """Parse the move/line/close dialect into absolute subpaths.

    Relative pairs chain onto the most recently resolved point. A close marks
    the subpath closed and returns the current point to its start; later
    lines keep extending that subpath until the next move. Empty subpaths
    are never emitted.
    """
    subpaths: List[Subpath] = []
    points: Optional[List[Point]] = None
    closed = False
    current: Optional[Point] = None
    start: Optional[Point] = None

    def flush():
        nonlocal points, closed
        if points:
            subpaths.append(Subpath(points, closed))
        points = None
        closed = False

    for cmd in parse_commands(path_data):
        if cmd.absolute_command == "Z":
            if points:
                closed = True
            if start is not None:
                current = start
            continue

        x, y = cmd.coordinates
        if cmd.is_relative and current is not None:
            x += current.x
            y += current.y
        point = Point(x, y)

        if cmd.absolute_command == "M":
            flush()
            points = [point]
            start = point
        else:
            if points is None:
                points = []
                start = point
            points.append(point)
        current = point

    flush()
    return subpaths


def commands_from_subpaths(subpaths: List[Subpath]) -> List[PathCommand]:
    commands: List[PathCommand] = []
    for subpath in subpaths:
        if len(subpath) == 0:
            continue
        first, *rest = list(subpath)
        commands.append(PathCommand("M", [first.x, first.y]))
        for point in rest:
            commands.append(PathCommand("L", [point.x, point.y]))
        if subpath.closed:
            commands.append(PathCommand("Z", []))
    return commands


def serialize_subpaths(subpaths: List[Subpath]) -> str:
    """Canonical absolute path text: ``M``/``L`` pairs, ``Z`` for closed subpaths."""
    return " ".join(cmd.to_string() for cmd in commands_from_subpaths(subpaths))
