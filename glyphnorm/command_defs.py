import math
import re
from typing import List, Union

from .hyperparameters import COORDINATE_PLACES

# Only the dialect's own letters delimit commands; any other character,
# including a dangling exponent marker, is junk inside the running command.
TOKEN_RE = re.compile(
    r"(?P<number>[+-]?(?:\d*\.\d+|\d+\.?\d*)(?:[eE][+-]?\d+)?)"
    r"|(?P<command>[MmLlZz])"
)


def format_number(value: float, places: int = COORDINATE_PLACES) -> str:
    """Canonical decimal text for a coordinate: fixed rounding, no exponent,
    no trailing zeros and no negative zero."""
    rounded = round(float(value), places)
    if rounded == 0:
        rounded = 0.0
    text = f"{rounded:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class PathCommand:
    """One command of the move/line/close path dialect.

    ``command`` is stored as written, so lowercase means relative.
    """

    grammar = {
        "M": 2,  # Move to (2 coordinates)
        "L": 2,  # Line to (2 coordinates)
        "Z": 0,  # Close path (no coordinates)
    }

    command: str
    coordinates: List[float]

    def __init__(self, command: str, coordinates: List[Union[int, float]]):
        if command.upper() not in self.grammar:
            raise ValueError(f"Invalid command: {command}")
        if len(coordinates) != self.grammar[command.upper()]:
            raise ValueError(
                f"Invalid number of coordinates for command {command}: expected {self.grammar[command.upper()]}, got {len(coordinates)}"
            )
        self.command = command
        self.coordinates = [float(c) for c in coordinates]

    @property
    def is_relative(self) -> bool:
        return self.command.islower()

    @property
    def absolute_command(self) -> str:
        return self.command.upper()

    def to_string(self) -> str:
        if not self.coordinates:
            return self.command
        return self.command + " ".join(format_number(c) for c in self.coordinates)

    def __eq__(self, other):
        if not isinstance(other, PathCommand):
            return NotImplemented
        return self.command == other.command and self.coordinates == other.coordinates

    def __repr__(self):
        return f"PathCommand({self.command!r}, {self.coordinates!r})"


def tokenize(path_data: str):
    """Split path data into ``(command, numbers)`` groups.

    Anything that is neither a number nor a command letter (separators,
    stray punctuation, other letters) is dropped without ending the current
    group. Numbers before the first command are ignored.
    """
    groups = []
    for match in TOKEN_RE.finditer(path_data):
        if match.group("command"):
            groups.append((match.group("command"), []))
        elif groups:
            groups[-1][1].append(float(match.group("number")))
    return groups


def commands_from_group(command: str, numbers: List[float]) -> List[PathCommand]:
    """Expand one tokenized group into single-pair commands.

    Commands outside the grammar yield nothing, as does a group with fewer
    than two numbers (other than Z); a trailing unpaired number is ignored.
    As in SVG, pairs after the first one of a move are line-tos. Pairs that
    overflow to infinity are skipped.
    """
    if command.upper() not in PathCommand.grammar:
        return []
    if command.upper() == "Z":
        return [PathCommand(command, [])]

    line_command = "l" if command.islower() else "L"
    commands = []
    for i in range(0, len(numbers) - 1, 2):
        pair = numbers[i : i + 2]
        if not all(math.isfinite(n) for n in pair):
            continue
        commands.append(PathCommand(command if not commands else line_command, pair))
    return commands
