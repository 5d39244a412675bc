from __future__ import annotations

import math
import numbers
import numpy
import operator
import typing
import typeguard

from . import Vector
from .. import Exceptions
from .. import Misc


RELATIVE_TOLERANCE: float = 1e-9
ABSOLUTE_TOLERANCE: float = 0.0


class Matrix(typing.Iterable[tuple[float, ...]]):
	"""
	Class representing a dense two-dimensional matrix of floats

	Most of this class favours readability over speed; determinant and inverse use direct cofactor expansion
	"""

	# Keeps numpy from broadcasting over matrices in reflected operators
	__array_ufunc__ = None

	@classmethod
	def shaped(cls, cells: typing.Iterable[float], rows: int, columns: int) -> Matrix:
		"""
		Creates a matrix from a row-major iterable of cells with the specified dimensions
		All derived matrices are built through this method
		:param cells: The input values in row-major order
		:param rows: The number of rows
		:param columns: The number of columns
		:return: The shaped matrix
		:raises InvalidDimensionsError: If either dimension is not positive or the cell count does not match
		:raises TypeError: If any cell is not a real number
		"""

		Misc.raise_if(rows <= 0 or columns <= 0, Exceptions.InvalidDimensionsError(f'Matrix dimensions must be positive; got {Misc.dimension_string(rows, columns)}'))
		array: list[float] = [Matrix.__cell__(x) for x in cells]
		Misc.raise_ifn(len(array) == rows * columns, Exceptions.InvalidDimensionsError(f'Expected {rows * columns} cells for a {Misc.dimension_string(rows, columns)} matrix; got {len(array)}'))

		instance: Matrix = cls.__new__(cls)
		instance.__rows__ = int(rows)
		instance.__columns__ = int(columns)
		instance.__array__ = array
		return instance

	@classmethod
	def fill(cls, rows: int, columns: int, value: float = 0.0) -> Matrix:
		"""
		Creates a matrix setting all cells to the specified value
		:param rows: The number of rows
		:param columns: The number of columns
		:param value: The value for all cells
		:return: The filled matrix
		:raises InvalidDimensionsError: If either dimension is not positive
		"""

		return cls.shaped([value] * max(rows * columns, 0), rows, columns)

	@classmethod
	def eye(cls, size: int) -> Matrix:
		"""
		Creates a square identity matrix
		:param size: The number of rows and columns
		:return: The identity matrix
		:raises InvalidDimensionsError: If size is not positive
		"""

		return cls.shaped((1.0 if i == j else 0.0 for i in range(size) for j in range(size)), size, size)

	@classmethod
	def from_numpy(cls, array: numpy.ndarray) -> Matrix:
		"""
		Copies a two-dimensional numpy array into a new matrix
		:param array: The source array
		:return: The matrix
		:raises InvalidArgumentException: If 'array' is not a numpy array
		:raises InvalidDimensionsError: If the array is not two-dimensional
		"""

		Misc.raise_ifn(isinstance(array, numpy.ndarray), Exceptions.InvalidArgumentException(Matrix.from_numpy, 'array', type(array), (numpy.ndarray,)))
		Misc.raise_ifn(array.ndim == 2, Exceptions.InvalidDimensionsError(f'Expected a two-dimensional array; got {array.ndim} dimension(s)'))
		return cls(array.tolist())

	@staticmethod
	def __cell__(value: typing.Any) -> float:
		"""
		INTERNAL METHOD
		Validates and converts a single cell value
		:param value: The cell value
		:return: The value as a float
		:raises TypeError: If the value is not a real number
		"""

		try:
			typeguard.check_type(value, numbers.Real)
		except typeguard.TypeCheckError:
			raise TypeError(f'Unexpected matrix value \'{value}\' ({type(value).__name__}), expected a real number') from None

		return float(value)

	def __init__(self, values: typing.Iterable[typing.Iterable[float]]):
		"""
		Class representing a dense two-dimensional matrix of floats
		- Constructor -
		:param values: A non-empty iterable of equally sized, non-empty rows
		:raises InvalidDimensionsError: If the input is empty or ragged
		:raises TypeError: If any cell is not a real number
		"""

		try:
			typeguard.check_type(values, typing.Iterable)
			rows: list[tuple] = [tuple(typeguard.check_type(row, typing.Iterable)) for row in values]
		except typeguard.TypeCheckError:
			raise TypeError(f'Expected an iterable of rows; got \'{values}\'') from None

		Misc.raise_if(len(rows) == 0, Exceptions.InvalidDimensionsError('Matrix must have at least one row'))
		columns: int = len(rows[0])
		Misc.raise_if(columns == 0, Exceptions.InvalidDimensionsError('Matrix must have at least one column'))

		for i, row in enumerate(rows):
			Misc.raise_ifn(len(row) == columns, Exceptions.InvalidDimensionsError(f'Row {i} has {len(row)} value(s); expected {columns}'))

		self.__rows__: int = len(rows)
		self.__columns__: int = columns
		self.__array__: list[float] = [Matrix.__cell__(x) for row in rows for x in row]

	@staticmethod
	def __key__(position: typing.Any) -> tuple[int, int] | int:
		"""
		INTERNAL METHOD
		Normalizes an index key to a row index or a (row, column) pair of python integers
		:param position: The key passed to item access
		:return: The normalized key
		:raises TypeError: If the key is neither an integer nor a pair of integers
		"""

		try:
			if isinstance(position, tuple) and len(position) == 2:
				return operator.index(position[0]), operator.index(position[1])

			return operator.index(position)
		except TypeError:
			raise TypeError(f'Matrix position must be an integer or a pair of integers, not \'{position}\'') from None

	def __position__(self, row: int, column: int) -> int:
		"""
		INTERNAL METHOD
		Converts a bounds-checked cell position into a flat index
		:param row: The zero-indexed row
		:param column: The zero-indexed column
		:return: The flat index
		:raises IndexError: If either index is out of range
		"""

		if not 0 <= row < self.__rows__:
			raise IndexError(f'Row index {row} out of range for a {Misc.dimension_string(self.__rows__, self.__columns__)} matrix')
		elif not 0 <= column < self.__columns__:
			raise IndexError(f'Column index {column} out of range for a {Misc.dimension_string(self.__rows__, self.__columns__)} matrix')

		return row * self.__columns__ + column

	def __len__(self) -> int:
		"""
		:return: The number of rows in this matrix, matching iteration
		"""

		return self.__rows__

	def __iter__(self) -> typing.Iterator[tuple[float, ...]]:
		"""
		:return: An iterator over the rows of this matrix
		"""

		for i in range(self.__rows__):
			yield self[i]

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {Misc.dimension_string(self.__rows__, self.__columns__)} @ {hex(id(self))}>'

	def __str__(self) -> str:
		return str(self.to_nested())

	def __getitem__(self, position: tuple[int, int] | int) -> float | tuple[float, ...]:
		"""
		Gets either a single cell or a full row from this matrix
		:param position: The zero-indexed (row, column) pair or a row index
		:return: The cell value or the row
		:raises IndexError: If the position is out of range
		:raises TypeError: If the position is neither an integer nor a pair of integers
		"""

		key: tuple[int, int] | int = Matrix.__key__(position)

		if isinstance(key, tuple):
			return self.__array__[self.__position__(*key)]

		start: int = self.__position__(key, 0)
		return tuple(self.__array__[start:start + self.__columns__])

	def __setitem__(self, position: tuple[int, int], value: float) -> None:
		"""
		Sets a single cell of this matrix in place
		:param position: The zero-indexed (row, column) pair
		:param value: The new cell value
		:raises IndexError: If the position is out of range
		:raises TypeError: If the position is not a pair of integers or the value is not a real number
		"""

		key: tuple[int, int] | int = Matrix.__key__(position)

		if not isinstance(key, tuple):
			raise TypeError(f'Matrix position must be a pair of integers, not \'{position}\'')

		self.__array__[self.__position__(*key)] = Matrix.__cell__(value)

	def __add__(self, other: Matrix) -> Matrix:
		"""
		Adds this matrix with another matrix of the same dimensions
		:param other: The matrix to add
		:return: The added matrix
		:raises InvalidDimensionsError: If the dimensions do not match
		"""

		if not isinstance(other, Matrix):
			return NotImplemented

		Misc.raise_ifn(self.dimensions == other.dimensions, Exceptions.InvalidDimensionsError(f'Cannot add matrix of dimension {Misc.dimension_string(*other.dimensions)} to matrix of dimension {Misc.dimension_string(*self.dimensions)}'))
		return Matrix.shaped((a + b for a, b in zip(self.__array__, other.__array__)), self.__rows__, self.__columns__)

	def __sub__(self, other: Matrix) -> Matrix:
		"""
		Subtracts another matrix of the same dimensions from this matrix
		:param other: The matrix to subtract
		:return: The subtracted matrix
		:raises InvalidDimensionsError: If the dimensions do not match
		"""

		if not isinstance(other, Matrix):
			return NotImplemented

		Misc.raise_ifn(self.dimensions == other.dimensions, Exceptions.InvalidDimensionsError(f'Cannot subtract matrix of dimension {Misc.dimension_string(*other.dimensions)} from matrix of dimension {Misc.dimension_string(*self.dimensions)}'))
		return self + -other

	def __mul__(self, other: float | int | Matrix | Vector.Vector | numpy.ndarray) -> Matrix:
		"""
		Multiplies this matrix with a scalar, matrix or vector
		:param other: The scalar to scale by or the matrix/vector to matrix-multiply with
		:return: The product matrix
		:raises InvalidDimensionsError: If this matrix's column count does not match the operand's row count
		:raises UnsupportedOperationError: If the operand is of an unsupported type
		"""

		if isinstance(other, (float, int, numpy.number)):
			return self.scale(other)

		return self.matmul(other)

	def __rmul__(self, other: float | int) -> Matrix:
		if isinstance(other, (float, int, numpy.number)):
			return self.scale(other)

		raise Exceptions.UnsupportedOperationError(f'Cannot multiply \'{type(other).__name__}\' with a matrix')

	def __matmul__(self, other: Matrix | Vector.Vector | numpy.ndarray) -> Matrix:
		return self.matmul(other)

	def __neg__(self) -> Matrix:
		return self.transform_by(lambda x: -x)

	def __eq__(self, other: typing.Any) -> bool:
		"""
		Checks whether two matrices have the same dimensions and all cells are close
		Vectors are compared by their backing matrix
		:param other: The matrix or vector to compare against
		:return: Whether the two are equal within the default tolerance
		"""

		if isinstance(other, (Matrix, Vector.Vector)):
			return self.is_close(other)

		return False

	def is_close(self, other: Matrix | Vector.Vector, rel_tol: typing.Optional[float] = None, abs_tol: typing.Optional[float] = None) -> bool:
		"""
		Checks whether two matrices have the same dimensions and all cells are close
		Two cells are close when |a - b| <= max(rel_tol * max(|a|, |b|), abs_tol)
		:param other: The matrix or vector to compare against
		:param rel_tol: The relative tolerance or None to use RELATIVE_TOLERANCE
		:param abs_tol: The absolute tolerance or None to use ABSOLUTE_TOLERANCE
		:return: Whether the two are equal within tolerance
		:raises InvalidArgumentException: If 'other' is not a matrix or vector
		"""

		if isinstance(other, Vector.Vector):
			other = other.to_matrix()

		Misc.raise_ifn(isinstance(other, Matrix), Exceptions.InvalidArgumentException(Matrix.is_close, 'other', type(other), (Matrix, Vector.Vector)))
		rel_tol = RELATIVE_TOLERANCE if rel_tol is None else rel_tol
		abs_tol = ABSOLUTE_TOLERANCE if abs_tol is None else abs_tol
		return self.dimensions == other.dimensions and all(math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol) for a, b in zip(self.__array__, other.__array__))

	def scale(self, factor: float) -> Matrix:
		"""
		Multiplies every cell of this matrix by a scalar
		:param factor: The scalar
		:return: The scaled matrix
		"""

		factor = float(factor)
		return self.transform_by(lambda x: x * factor)

	def matmul(self, other: Matrix | Vector.Vector | numpy.ndarray) -> Matrix:
		"""
		Matrix-multiplies this matrix with another matrix or vector
		:param other: The right-hand operand; vectors use their backing matrix and numpy arrays are copied
		:return: The product matrix (this.rows x other.columns)
		:raises InvalidDimensionsError: If this matrix's column count does not match the operand's row count
		:raises UnsupportedOperationError: If the operand is neither a matrix, vector nor numpy array
		"""

		if isinstance(other, Vector.Vector):
			other = other.to_matrix()
		elif isinstance(other, numpy.ndarray):
			other = Matrix.from_numpy(other)
		elif not isinstance(other, Matrix):
			raise Exceptions.UnsupportedOperationError(f'Cannot multiply a matrix with \'{type(other).__name__}\'')

		Misc.raise_ifn(self.__columns__ == other.__rows__, Exceptions.InvalidDimensionsError(f'Cannot matrix-multiply matrix of dimension {Misc.dimension_string(*self.dimensions)} with matrix of dimension {Misc.dimension_string(*other.dimensions)}'))
		common: int = self.__columns__
		cells: list[float] = []

		for r in range(self.__rows__):
			for c in range(other.__columns__):
				cells.append(sum(self.__array__[r * common + k] * other.__array__[k * other.__columns__ + c] for k in range(common)))

		return Matrix.shaped(cells, self.__rows__, other.__columns__)

	def transform_by(self, callback: typing.Callable[[float], float]) -> Matrix:
		"""
		Applies a function to all cells in this matrix
		:param callback: A transformer callback accepting a single float and returning a single float
		:return: The transformed matrix
		:raises InvalidArgumentException: If the callback is not callable
		"""

		Misc.raise_ifn(callable(callback), Exceptions.InvalidArgumentException(Matrix.transform_by, 'callback', type(callback), ('callable',)))
		return Matrix.shaped((float(callback(x)) for x in self.__array__), self.__rows__, self.__columns__)

	def transposed(self) -> Matrix:
		"""
		:return: The transposed matrix
		"""

		return Matrix.shaped((self.__array__[r * self.__columns__ + c] for c in range(self.__columns__) for r in range(self.__rows__)), self.__columns__, self.__rows__)

	def minor(self, row: int, column: int) -> Matrix:
		"""
		Gets the minor matrix of this matrix with the given row and column removed
		:param row: The row to remove
		:param column: The column to remove
		:return: The (rows - 1) x (columns - 1) minor matrix
		:raises IndexError: If the row or column is out of range
		:raises InvalidDimensionsError: If this matrix has only a single row or column
		"""

		self.__position__(row, column)
		Misc.raise_if(self.__rows__ < 2 or self.__columns__ < 2, Exceptions.InvalidDimensionsError(f'Matrix of dimension {Misc.dimension_string(*self.dimensions)} has no minor'))
		cells: tuple[float, ...] = tuple(self.__array__[r * self.__columns__ + c] for r in range(self.__rows__) if r != row for c in range(self.__columns__) if c != column)
		return Matrix.shaped(cells, self.__rows__ - 1, self.__columns__ - 1)

	def __cofactor__(self, row: int, column: int) -> float:
		"""
		INTERNAL METHOD
		:return: The signed determinant of the minor at (row, column)
		"""

		return (-1) ** (row + column) * self.minor(row, column).determinant()

	def determinant(self) -> float:
		"""
		Calculates the determinant of this matrix through cofactor expansion
		Expansion runs along whichever row or column holds the most exact zeros; zero cells are skipped
		:return: The determinant
		:raises InvalidDimensionsError: If this matrix is not square or is smaller than 2x2
		"""

		Misc.raise_ifn(self.is_square(), Exceptions.InvalidDimensionsError(f'Cannot compute determinant of non-square matrix of dimension {Misc.dimension_string(*self.dimensions)}'))
		Misc.raise_if(self.__rows__ < 2, Exceptions.InvalidDimensionsError('Determinant requires at least a 2x2 matrix'))
		size: int = self.__rows__

		if size == 2:
			a, b, c, d = self.__array__
			return a * d - c * b

		best_column: int = -1
		best_column_zeros: int = 0

		for c in range(size):
			zeros: int = sum(1 for r in range(size) if self.__array__[r * size + c] == 0.0)

			if zeros >= best_column_zeros:
				best_column, best_column_zeros = c, zeros

		best_row: int = -1
		best_row_zeros: int = 0

		for r in range(size):
			zeros: int = sum(1 for c in range(size) if self.__array__[r * size + c] == 0.0)

			if zeros >= best_row_zeros:
				best_row, best_row_zeros = r, zeros

		if best_column_zeros > best_row_zeros:
			line: tuple[tuple[int, int], ...] = tuple((r, best_column) for r in range(size))
		else:
			line: tuple[tuple[int, int], ...] = tuple((best_row, c) for c in range(size))

		determinant: float = 0.0

		for r, c in line:
			value: float = self.__array__[r * size + c]

			if value != 0.0:
				determinant += value * self.__cofactor__(r, c)

		return determinant

	def cofactors(self) -> Matrix:
		"""
		Calculates the cofactor matrix of this matrix
		:return: The matrix of signed minor determinants
		:raises InvalidDimensionsError: If this matrix is not square or is smaller than 3x3
		"""

		Misc.raise_ifn(self.is_square(), Exceptions.InvalidDimensionsError(f'Cannot compute cofactors of non-square matrix of dimension {Misc.dimension_string(*self.dimensions)}'))
		Misc.raise_if(self.__rows__ < 3, Exceptions.InvalidDimensionsError('Cofactors require at least a 3x3 matrix'))
		return Matrix.shaped((self.__cofactor__(r, c) for r in range(self.__rows__) for c in range(self.__columns__)), self.__rows__, self.__columns__)

	def inverted(self) -> Matrix:
		"""
		Calculates the inverse of this matrix
		2x2 matrices use the closed form; larger matrices use the adjugate (transposed cofactors)
		:return: The inverse matrix
		:raises InvalidDimensionsError: If this matrix is not square or is smaller than 2x2
		:raises NoInverseError: If the determinant is zero within tolerance
		"""

		determinant: float = self.determinant()
		Misc.raise_if(math.isclose(determinant, 0.0, rel_tol=RELATIVE_TOLERANCE, abs_tol=ABSOLUTE_TOLERANCE), Exceptions.NoInverseError())

		if self.__rows__ == 2:
			a, b, c, d = self.__array__
			adjugate: Matrix = Matrix.shaped((d, -1.0 * b, -1.0 * c, a), 2, 2)
		else:
			adjugate: Matrix = self.cofactors().transposed()

		return adjugate.scale(1 / determinant)

	def is_square(self) -> bool:
		return self.__rows__ == self.__columns__

	def copy(self) -> Matrix:
		"""
		:return: An independent copy of this matrix
		"""

		return Matrix.shaped(self.__array__, self.__rows__, self.__columns__)

	def flattened(self) -> tuple[float, ...]:
		"""
		:return: All cells of this matrix in row-major order
		"""

		return tuple(self.__array__)

	def to_nested(self) -> list[list[float]]:
		"""
		:return: This matrix converted to a list of row lists
		"""

		return [list(row) for row in self]

	def to_numpy(self) -> numpy.ndarray:
		"""
		:return: This matrix converted to a two-dimensional numpy array
		"""

		return numpy.array(self.__array__, dtype=float).reshape(self.dimensions)

	def to_vector(self) -> Vector.Vector:
		"""
		Converts this matrix to a vector if one of its dimensions is 1
		:return: The row or column vector
		:raises InvalidDimensionsError: If neither dimension is 1
		"""

		return Vector.Vector.from_matrix(self)

	@property
	def rows(self) -> int:
		return self.__rows__

	@property
	def columns(self) -> int:
		return self.__columns__

	@property
	def dimensions(self) -> tuple[int, int]:
		"""
		:return: The (rows, columns) pair of this matrix
		"""

		return self.__rows__, self.__columns__
