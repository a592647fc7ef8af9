"""
Snake body model: an ordered, immutable list of grid coordinates.

Index 0 is the head, the last index is the tail. Every operation returns a
new Snake and leaves the receiver untouched.
"""

# Directions: (dx, dy)
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Input sentinel, delivered by the key poller alongside the directions
QUIT = "quit"

# Coordinates saturate at both ends of this range
MIN_COORD = 0
MAX_COORD = 255

ORIGIN = (0, 0)


class SnakeError(AssertionError):
    """Raised when a caller breaks a Snake precondition."""


def _clamp(value):
    return max(MIN_COORD, min(MAX_COORD, value))


class Snake:
    __slots__ = ("_segments",)

    def __init__(self, segments):
        segments = tuple(tuple(seg) for seg in segments)
        if not segments:
            raise ValueError("a snake needs at least one segment")
        self._segments = segments

    @classmethod
    def default(cls):
        """A one-segment snake sitting on the origin."""
        return cls([ORIGIN])

    @property
    def segments(self):
        return self._segments

    def head(self):
        return self._segments[0]

    def add_segment(self, new_head):
        """Grow by one: new_head becomes the head, nothing drops off the tail.

        Used after eating an apple, with the apple's position as new_head.
        Growing onto the current head is a caller bug and raises SnakeError.
        """
        new_head = tuple(new_head)
        if new_head == self.head():
            raise SnakeError(f"cannot grow onto the current head {new_head}")
        return Snake((new_head,) + self._segments)

    def shift(self, direction):
        """Move one step: drop the tail and push a new head in `direction`.

        Moving past either end of the coordinate range clamps instead of
        wrapping, so a head already at 0 moving up/left stays where it is.
        """
        dx, dy = direction
        x, y = self.head()
        new_head = (_clamp(x + dx), _clamp(y + dy))
        return Snake((new_head,) + self._segments[:-1])

    def score(self):
        """Number of segments, head included."""
        return len(self._segments)

    def occupies(self, pos):
        # O(n) over the body
        return tuple(pos) in self._segments

    def colliding_with_self(self):
        head = self._segments[0]
        return head in self._segments[1:]

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    def __eq__(self, other):
        if not isinstance(other, Snake):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self):
        return hash(self._segments)

    def __repr__(self):
        return f"Snake({list(self._segments)!r})"
