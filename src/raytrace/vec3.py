import math
import numbers
from typing import Iterator, Tuple


def _to_byte(value: float) -> int:
    # 255.99 keeps v just below 1.0 from quantising to 256
    if not value >= 0.0:  # also catches nan
        return 0
    if value >= 1.0:
        return 255
    return int(value * 255.99)


def _divide(value: float, divisor: float) -> float:
    if divisor != 0:
        return value / divisor
    if value == 0 or math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value) * math.copysign(1.0, divisor)


class Vec3:
    """
    A small immutable 3D vector used for points, directions and colours.

    Every operation returns a new Vec3, the operands are never modified.
    """

    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: float, y: float, z: float) -> None:
        """
        Initialize a Vec3 instance.

        Args:
            x (float): The x component.
            y (float): The y component.
            z (float): The z component.

        Raises:
            TypeError: If a component is not a real number.
        """
        for name, value in (("x", x), ("y", y), ("z", z)):
            if not isinstance(value, numbers.Real):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
        self._x: float = float(x)
        self._y: float = float(y)
        self._z: float = float(z)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def __str__(self) -> str:
        return f"({self._x}, {self._y}, {self._z})"

    def __repr__(self) -> str:
        return f"Vec3({self._x}, {self._y}, {self._z})"

    def __iter__(self) -> Iterator[float]:
        return iter((self._x, self._y, self._z))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self._x, self._y, self._z)

    def __eq__(self, other: object) -> bool:
        """
        Check if two Vec3 instances are equal within floating point tolerance.

        Args:
            other (object): The object to compare.

        Returns:
            bool: True if equal, False otherwise.
        """
        if not isinstance(other, Vec3):
            return NotImplemented
        return (
            math.isclose(self._x, other._x)
            and math.isclose(self._y, other._y)
            and math.isclose(self._z, other._z)
        )

    # tolerance based equality is not hash compatible
    __hash__ = None

    def is_close(self, other: "Vec3", tol: float = 1e-4) -> bool:
        """
        Compare against another vector using an absolute tolerance per component.

        Args:
            other (Vec3): The vector to compare with.
            tol (float): Largest allowed absolute difference of a component.

        Returns:
            bool: True if every component is within tol.
        """
        if not isinstance(other, Vec3):
            raise TypeError(f"is_close expects a Vec3, got {type(other).__name__}")
        return (
            abs(self._x - other._x) <= tol
            and abs(self._y - other._y) <= tol
            and abs(self._z - other._z) <= tol
        )

    def __add__(self, other: "Vec3") -> "Vec3":
        """
        Add two Vec3 vectors.

        Args:
            other (Vec3): The vector to add.

        Returns:
            Vec3: The result of vector addition.
        """
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self._x + other._x, self._y + other._y, self._z + other._z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        """
        Subtract one Vec3 vector from another.

        Args:
            other (Vec3): The vector to subtract.

        Returns:
            Vec3: The result of vector subtraction.
        """
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self._x - other._x, self._y - other._y, self._z - other._z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self._x, -self._y, -self._z)

    def __mul__(self, other) -> "Vec3":
        """
        Multiply by a scalar, or component-wise by another vector (Hadamard product).

        Args:
            other (float | Vec3): The scalar or vector to multiply by.

        Returns:
            Vec3: The scaled vector.
        """
        if isinstance(other, Vec3):
            return Vec3(self._x * other._x, self._y * other._y, self._z * other._z)
        if isinstance(other, numbers.Real):
            return Vec3(self._x * other, self._y * other, self._z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vec3":
        """
        Multiply the vector by a scalar (right-hand side).

        Args:
            scalar (float): The scalar value.

        Returns:
            Vec3: The result of scalar multiplication.
        """
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vec3":
        """
        Divide each component by a scalar.

        Dividing by zero gives infinities (or nan for a zero component)
        instead of raising ZeroDivisionError.

        Args:
            scalar (float): The divisor.

        Returns:
            Vec3: The result of the division.
        """
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vec3(
            _divide(self._x, scalar),
            _divide(self._y, scalar),
            _divide(self._z, scalar),
        )

    def dot(self, other: "Vec3") -> float:
        """
        Compute the dot product of two vectors.

        Args:
            other (Vec3): The other vector.

        Returns:
            float: The dot product.
        """
        if not isinstance(other, Vec3):
            raise TypeError(f"dot expects a Vec3, got {type(other).__name__}")
        return self._x * other._x + self._y * other._y + self._z * other._z

    def cross(self, other: "Vec3") -> "Vec3":
        """
        Compute the cross product of two vectors.

        Args:
            other (Vec3): The other vector.

        Returns:
            Vec3: The cross product vector.
        """
        if not isinstance(other, Vec3):
            raise TypeError(f"cross expects a Vec3, got {type(other).__name__}")
        return Vec3(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def length_squared(self) -> float:
        return self._x * self._x + self._y * self._y + self._z * self._z

    def length(self) -> float:
        """
        Calculate the length (Euclidean norm) of the vector.

        Returns:
            float: The length of the vector.
        """
        return math.sqrt(self.length_squared())

    def to_rgb(self) -> Tuple[int, int, int]:
        """
        Convert a colour in the [0, 1) range to 8 bit RGB values.

        Components below 0 become 0, components at or above 1 become 255,
        anything in between is scaled by 255.99 and truncated.

        Returns:
            tuple[int, int, int]: The red, green and blue bytes.
        """
        return (_to_byte(self._x), _to_byte(self._y), _to_byte(self._z))
