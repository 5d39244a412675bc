from __future__ import annotations

import enum
import math
import numpy
import typing

from . import Matrix
from .. import Exceptions
from .. import Misc


class VectorType(enum.Enum):
	ROW = 'row'
	COLUMN = 'column'


class Vector(typing.Iterable[float]):
	"""
	Class representing a row or column vector backed by a 1xN or Nx1 matrix
	"""

	__array_ufunc__ = None

	@classmethod
	def from_matrix(cls, matrix: Matrix.Matrix) -> Vector:
		"""
		Converts a matrix to a vector if one of its dimensions is 1
		A single-row matrix becomes a row vector, a single-column matrix a column vector
		:param matrix: The source matrix
		:return: The vector
		:raises InvalidArgumentException: If 'matrix' is not a matrix
		:raises InvalidDimensionsError: If neither dimension is 1
		"""

		Misc.raise_ifn(isinstance(matrix, Matrix.Matrix), Exceptions.InvalidArgumentException(Vector.from_matrix, 'matrix', type(matrix), (Matrix.Matrix,)))

		if matrix.rows == 1:
			return cls(matrix, VectorType.ROW)
		elif matrix.columns == 1:
			return cls(matrix, VectorType.COLUMN)

		raise Exceptions.InvalidDimensionsError(f'Rows or columns must be 1 to convert to a vector; got {Misc.dimension_string(*matrix.dimensions)}')

	@classmethod
	def row(cls, values: typing.Iterable[float]) -> Vector:
		"""
		Creates a row vector from the specified values
		:param values: The vector elements
		:return: The row vector
		"""

		return cls(Matrix.Matrix([tuple(values)]), VectorType.ROW)

	@classmethod
	def column(cls, values: typing.Iterable[float]) -> Vector:
		"""
		Creates a column vector from the specified values
		:param values: The vector elements
		:return: The column vector
		"""

		return cls(Matrix.Matrix((x,) for x in values), VectorType.COLUMN)

	@classmethod
	def fill_row(cls, count: int, value: float = 0.0) -> Vector:
		return cls(Matrix.Matrix.fill(1, count, value), VectorType.ROW)

	@classmethod
	def fill_column(cls, count: int, value: float = 0.0) -> Vector:
		return cls(Matrix.Matrix.fill(count, 1, value), VectorType.COLUMN)

	def __init__(self, matrix: Matrix.Matrix, orientation: VectorType):
		"""
		Class representing a row or column vector backed by a 1xN or Nx1 matrix
		- Constructor -
		The matrix is copied
		:param matrix: The backing matrix
		:param orientation: Whether the vector is a row or a column
		:raises InvalidArgumentException: If either argument is of the wrong type
		:raises InvalidDimensionsError: If the matrix shape does not match the orientation
		"""

		Misc.raise_ifn(isinstance(matrix, Matrix.Matrix), Exceptions.InvalidArgumentException(Vector.__init__, 'matrix', type(matrix), (Matrix.Matrix,)))
		Misc.raise_ifn(isinstance(orientation, VectorType), Exceptions.InvalidArgumentException(Vector.__init__, 'orientation', type(orientation), (VectorType,)))
		Misc.raise_if(orientation is VectorType.ROW and matrix.rows != 1, Exceptions.InvalidDimensionsError(f'A row vector must have exactly 1 row; got {matrix.rows}'))
		Misc.raise_if(orientation is VectorType.COLUMN and matrix.columns != 1, Exceptions.InvalidDimensionsError(f'A column vector must have exactly 1 column; got {matrix.columns}'))

		self.__matrix__: Matrix.Matrix = matrix.copy()
		self.__orientation__: VectorType = orientation

	def __len__(self) -> int:
		return self.elements

	def __iter__(self) -> typing.Iterator[float]:
		return iter(self.__matrix__.flattened())

	def __getitem__(self, element: int) -> float:
		"""
		Gets a single element from this vector
		:param element: The zero-indexed element
		:return: The element value
		:raises IndexError: If the element is out of range
		"""

		if self.__orientation__ is VectorType.ROW:
			return self.__matrix__[0, element]
		else:
			return self.__matrix__[element, 0]

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {self.__orientation__.name} {self.elements} @ {hex(id(self))}>'

	def __str__(self) -> str:
		if self.__orientation__ is VectorType.ROW:
			return str(list(self))

		return '[\n' + ',\n'.join(f'\t{x}' for x in self) + '\n]\n'

	def __add__(self, other: Vector) -> Vector:
		"""
		Adds this vector with another vector of the same shape
		:param other: The vector to add
		:return: The added vector, oriented like this vector
		:raises InvalidDimensionsError: If the vector lengths or orientations differ
		"""

		if not isinstance(other, Vector):
			return NotImplemented

		Misc.raise_ifn(self.elements == other.elements, Exceptions.InvalidDimensionsError(f'Mismatched vector lengths {self.elements} and {other.elements}'))
		return Vector(self.__matrix__ + other.__matrix__, self.__orientation__)

	def __sub__(self, other: Vector) -> Vector:
		"""
		Subtracts another vector of the same shape from this vector
		:param other: The vector to subtract
		:return: The subtracted vector, oriented like this vector
		:raises InvalidDimensionsError: If the vector lengths or orientations differ
		"""

		if not isinstance(other, Vector):
			return NotImplemented

		Misc.raise_ifn(self.elements == other.elements, Exceptions.InvalidDimensionsError(f'Mismatched vector lengths {self.elements} and {other.elements}'))
		return Vector(self.__matrix__ - other.__matrix__, self.__orientation__)

	def __neg__(self) -> Vector:
		return self.transform_by(lambda x: -x)

	def __mul__(self, other: float | int | Matrix.Matrix | Vector) -> Matrix.Matrix:
		"""
		Multiplies the backing matrix of this vector with a scalar, matrix or vector
		The result is always a matrix; use 'Matrix.to_vector' to convert it back
		:param other: The right-hand operand
		:return: The product matrix
		:raises InvalidDimensionsError: If the operand shapes are incompatible
		:raises UnsupportedOperationError: If the operand is of an unsupported type
		"""

		return self.__matrix__ * other

	def __rmul__(self, other: float | int) -> Matrix.Matrix:
		return other * self.__matrix__

	def __matmul__(self, other: Matrix.Matrix | Vector) -> Matrix.Matrix:
		return self.__matrix__.matmul(other)

	def __eq__(self, other: typing.Any) -> bool:
		"""
		Compares the backing matrices of this and another vector or matrix within the default tolerance
		:param other: The vector or matrix to compare against
		:return: Whether the two are equal
		"""

		return self.__matrix__ == other

	def transform_by(self, callback: typing.Callable[[float], float]) -> Vector:
		"""
		Applies a function to all elements in this vector
		:param callback: A transformer callback accepting a single float and returning a single float
		:return: The transformed vector, oriented like this vector
		"""

		return Vector(self.__matrix__.transform_by(callback), self.__orientation__)

	def transposed(self) -> Vector:
		"""
		:return: This vector flipped from row to column or column to row
		"""

		return Vector(self.__matrix__.transposed(), VectorType.COLUMN if self.__orientation__ is VectorType.ROW else VectorType.ROW)

	def magnitude(self) -> float:
		"""
		:return: The euclidean length of this vector
		"""

		return math.sqrt(sum(x * x for x in self))

	def normalized(self) -> Vector:
		"""
		Scales this vector to a magnitude of 1
		:return: The unit vector
		:raises ZeroDivisionError: If this is a zero vector
		"""

		return Vector.from_matrix(self.__matrix__ * (1.0 / self.magnitude()))

	def dot(self, other: Vector) -> float:
		"""
		Applies inner dot-product between two vectors
		Orientation is ignored
		:param other: The second vector
		:return: The dot product of these two vectors
		:raises InvalidArgumentException: If 'other' is not a vector
		:raises InvalidDimensionsError: If the vector lengths differ
		"""

		Misc.raise_ifn(isinstance(other, Vector), Exceptions.InvalidArgumentException(Vector.dot, 'other', type(other), (Vector,)))
		Misc.raise_ifn(self.elements == other.elements, Exceptions.InvalidDimensionsError(f'Mismatched vector lengths {self.elements} and {other.elements}'))
		return sum(a * b for a, b in zip(self, other))

	def cross(self, other: Vector) -> Vector:
		"""
		Calculates cross product between two 3-element vectors
		:param other: The second vector
		:return: A vector perpendicular to both, oriented like this vector
		:raises InvalidArgumentException: If 'other' is not a vector
		:raises UnsupportedOperationError: If this vector does not have exactly 3 elements
		:raises InvalidDimensionsError: If the vector lengths differ
		"""

		Misc.raise_ifn(isinstance(other, Vector), Exceptions.InvalidArgumentException(Vector.cross, 'other', type(other), (Vector,)))
		Misc.raise_ifn(self.elements == 3, Exceptions.UnsupportedOperationError(f'Cross product is only defined for 3-element vectors; got {self.elements}'))
		Misc.raise_ifn(self.elements == other.elements, Exceptions.InvalidDimensionsError(f'Mismatched vector lengths {self.elements} and {other.elements}'))

		a1, a2, a3 = self
		b1, b2, b3 = other
		components: tuple[float, float, float] = (a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1)
		return Vector.row(components) if self.__orientation__ is VectorType.ROW else Vector.column(components)

	def to_matrix(self) -> Matrix.Matrix:
		"""
		:return: A copy of the backing matrix
		"""

		return self.__matrix__.copy()

	def to_numpy(self) -> numpy.ndarray:
		"""
		:return: The elements of this vector as a one-dimensional numpy array
		"""

		return numpy.array(self.__matrix__.flattened(), dtype=float)

	@property
	def orientation(self) -> VectorType:
		return self.__orientation__

	@property
	def elements(self) -> int:
		"""
		:return: The number of elements in this vector
		"""

		return self.__matrix__.columns if self.__orientation__ is VectorType.ROW else self.__matrix__.rows
