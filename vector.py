# vector.py
"""
A small 2D vector value type used by the physics code.

Vectors are immutable by convention: every operation returns a new
instance, and `a += b` simply rebinds `a` to `a + b`.
"""
import math

# --- Data Contracts ---
#
# class Vector2:
#   - __init__(self, x: float = 0.0, y: float = 0.0)
#   - Operators: +, - (binary and unary), * (scalar, either side), ==.
#   - dot(other) -> float, length() -> float, length_squared() -> float
#   - normalized() -> Vector2
#     - Invariants: returns the zero vector for a zero-length input
#       instead of dividing by zero.


class Vector2:
    """A 2D vector with float components."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vector2":
        """
        Returns a unit vector in the same direction.

        The zero vector normalizes to itself, so callers that need a unit
        result must check for that case.
        """
        length = self.length()
        if length == 0:
            return Vector2()
        return self * (1.0 / length)
