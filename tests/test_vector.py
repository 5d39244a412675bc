"""
Tests for LinAlg.Math.Vector

Covers construction, orientation invariants, delegation to the matrix
engine, products and rendering
"""

import math

import numpy
import pytest

from LinAlg import Exceptions
from LinAlg.Math.Matrix import Matrix
from LinAlg.Math.Vector import Vector, VectorType


class TestConstruction:
	"""Vector factories and orientation validation"""

	def test_row(self) -> None:
		vector: Vector = Vector.row([1.0, 2.0, 3.0])
		assert (vector[0], vector[1], vector[2]) == (1.0, 2.0, 3.0)
		assert vector.orientation is VectorType.ROW
		assert vector.to_matrix().dimensions == (1, 3)

	def test_column(self) -> None:
		vector: Vector = Vector.column([1.0, 2.0, 3.0])
		assert (vector[0], vector[1], vector[2]) == (1.0, 2.0, 3.0)
		assert vector.orientation is VectorType.COLUMN
		assert vector.to_matrix().dimensions == (3, 1)

	def test_fill(self) -> None:
		assert list(Vector.fill_row(3, 1.0)) == [1.0, 1.0, 1.0]
		assert list(Vector.fill_column(3)) == [0.0, 0.0, 0.0]
		assert Vector.fill_column(3).orientation is VectorType.COLUMN

	@pytest.mark.parametrize('count', [0, -1])
	def test_fill_rejects_non_positive_count(self, count: int) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.fill_row(count)

		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.fill_column(count)

	def test_empty_values_rejected(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.row([])

		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.column([])

	def test_from_matrix(self) -> None:
		row: Vector = Vector.from_matrix(Matrix([[1, 2, 3]]))
		column: Vector = Vector.from_matrix(Matrix([[1], [2], [3]]))
		assert row.orientation is VectorType.ROW and row == Vector.row([1, 2, 3])
		assert column.orientation is VectorType.COLUMN and column == Vector.column([1, 2, 3])

	def test_from_1x1_matrix_is_row(self) -> None:
		assert Vector.from_matrix(Matrix([[5.0]])).orientation is VectorType.ROW

	def test_from_non_vector_matrix(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.from_matrix(Matrix.eye(2))

		with pytest.raises(Exceptions.InvalidArgumentException):
			Vector.from_matrix([[1.0, 2.0]])

	def test_orientation_must_match_shape(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector(Matrix([[1], [2]]), VectorType.ROW)

		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector(Matrix([[1, 2]]), VectorType.COLUMN)

	def test_backing_matrix_is_owned(self) -> None:
		matrix: Matrix = Matrix([[1, 2, 3]])
		vector: Vector = matrix.to_vector()
		matrix[0, 0] = 9.0
		assert vector[0] == 1.0

		backing: Matrix = vector.to_matrix()
		backing[0, 1] = 9.0
		assert vector[1] == 2.0


class TestAccess:
	"""Indexing, length and rendering"""

	def test_elements(self) -> None:
		assert Vector.row([1, 2, 3, 4]).elements == 4
		assert len(Vector.column([1, 2])) == 2

	@pytest.mark.parametrize('vector', [Vector.row([1, 2]), Vector.column([1, 2])])
	def test_out_of_range(self, vector: Vector) -> None:
		with pytest.raises(IndexError):
			vector[2]

	def test_row_rendering(self) -> None:
		assert str(Vector.fill_row(4, 4.0)) == '[4.0, 4.0, 4.0, 4.0]'

	def test_column_rendering(self) -> None:
		assert str(Vector.fill_column(4, 4.0)) == '[\n\t4.0,\n\t4.0,\n\t4.0,\n\t4.0\n]\n'
		assert str(Vector.column([1.5])) == '[\n\t1.5\n]\n'

	def test_repr(self) -> None:
		assert repr(Vector.column([1, 2, 3])).startswith('<Vector COLUMN 3 @ 0x')

	def test_to_numpy(self) -> None:
		assert numpy.array_equal(Vector.column([1, 2, 3]).to_numpy(), numpy.array([1.0, 2.0, 3.0]))


class TestArithmetic:
	"""Operations delegated to the matrix engine"""

	def test_magnitude(self) -> None:
		assert Vector.column([1.0, 2.0, 3.0]).magnitude() == math.sqrt(14)
		assert Vector.row([3.0, 4.0]).magnitude() == 5.0

	def test_transposed(self) -> None:
		transposed: Vector = Vector.column([1.0, 2.0, 3.0]).transposed()
		assert transposed.orientation is VectorType.ROW
		assert transposed == Vector.row([1.0, 2.0, 3.0])
		assert transposed.transposed() == Vector.column([1.0, 2.0, 3.0])

	def test_add(self) -> None:
		assert Vector.column([1.0, 2.0, 3.0]) + Vector.fill_column(3, 1.0) == Vector.column([2.0, 3.0, 4.0])

	def test_subtract(self) -> None:
		result: Vector = Vector.row([1.0, 2.0, 3.0]) - Vector.fill_row(3, 1.0)
		assert result.orientation is VectorType.ROW
		assert result == Vector.row([0.0, 1.0, 2.0])

	def test_add_length_mismatch(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.fill_column(3) + Vector.fill_column(2)

		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.fill_column(3) - Vector.fill_column(2)

	def test_add_orientation_mismatch(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.fill_column(3) + Vector.fill_row(3)

	def test_negate(self) -> None:
		negated: Vector = -Vector.fill_row(4, 4.0)
		assert negated == Vector.fill_row(4, -4.0)
		assert negated.orientation is VectorType.ROW

	def test_row_times_column(self) -> None:
		product = Vector.row([2.0, 3.0, 4.0]) * Vector.column([1.0, 2.0, 3.0])
		assert isinstance(product, Matrix)
		assert product == Matrix([[20.0]])

	def test_column_times_row(self) -> None:
		product = Vector.column([1.0, 2.0]) @ Vector.row([3.0, 4.0])
		assert product == Matrix([[3.0, 4.0], [6.0, 8.0]])

	def test_product_result_can_be_rewrapped(self) -> None:
		product: Matrix = Matrix([[2.0, 3.0, 4.0], [3.0, 4.0, 5.0]]) * Vector.column([1.0, 2.0, 3.0])
		assert product.to_vector() == Vector.column([20.0, 26.0])

		with pytest.raises(Exceptions.InvalidDimensionsError):
			(Vector.column([1.0, 2.0]) * Vector.row([3.0, 4.0])).to_vector()

	def test_scalar_product_is_matrix(self) -> None:
		assert isinstance(Vector.row([1, 2]) * 2, Matrix)
		assert 2 * Vector.row([1, 2]) == Vector.row([2, 4])

	def test_product_dimension_mismatch(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.row([1, 2, 3]) * Vector.row([1, 2, 3])

	def test_unsupported_operand(self) -> None:
		with pytest.raises(Exceptions.UnsupportedOperationError):
			Vector.row([1, 2, 3]) * 'a'

	def test_equality(self) -> None:
		assert Vector.column([1.0, 2.0, 3.0]) == Vector.column([1.0, 2.0, 3.0])
		assert Vector.column([1.0, 2.0, 3.0]) == Matrix([[1.0], [2.0], [3.0]])
		assert Vector.column([1.0, 2.0, 3.0]) != Vector.row([1.0, 2.0, 3.0])
		assert Vector.column([1.0, 2.0, 3.0]) != [1.0, 2.0, 3.0]

	def test_transform_by(self) -> None:
		mapped: Vector = Vector.column([1.0, 2.0, 3.0]).transform_by(lambda x: x * 2)
		assert mapped == Vector.column([2.0, 4.0, 6.0])
		assert mapped.orientation is VectorType.COLUMN

	def test_normalized(self) -> None:
		assert Vector.fill_row(4, 4.0).normalized() == Vector.row([0.5, 0.5, 0.5, 0.5])
		assert math.isclose(Vector.column([3.0, 1.0, 2.0]).normalized().magnitude(), 1.0)

	def test_normalized_zero_vector(self) -> None:
		with pytest.raises(ZeroDivisionError):
			Vector.fill_column(3).normalized()


class TestProducts:
	"""Cross and dot products"""

	def test_cross(self) -> None:
		assert Vector.column([2.0, 3.0, 4.0]).cross(Vector.column([5.0, 6.0, 7.0])) == Vector.column([-3.0, 6.0, -3.0])

	def test_cross_orientation_follows_left_operand(self) -> None:
		result: Vector = Vector.row([1.0, 0.0, 0.0]).cross(Vector.column([0.0, 1.0, 0.0]))
		assert result.orientation is VectorType.ROW
		assert result == Vector.row([0.0, 0.0, 1.0])

	def test_cross_anti_commutative(self) -> None:
		a: Vector = Vector.column([1.5, -2.0, 7.25])
		b: Vector = Vector.column([0.5, 4.0, -3.0])
		assert a.cross(b) == -(b.cross(a))

	def test_cross_requires_3_elements(self) -> None:
		with pytest.raises(Exceptions.UnsupportedOperationError):
			Vector.fill_column(4).cross(Vector.fill_column(4))

		with pytest.raises(Exceptions.UnsupportedOperationError):
			Vector.fill_column(2).cross(Vector.fill_column(3))

	def test_cross_length_mismatch(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.fill_column(3).cross(Vector.fill_column(2))

	def test_dot(self) -> None:
		assert Vector.column([2.0, 3.0, 4.0]).dot(Vector.column([5.0, 6.0, 7.0])) == 56.0
		assert Vector.row([2.0, 3.0, 4.0]).dot(Vector.column([5.0, 6.0, 7.0])) == 56.0

	def test_dot_commutative(self) -> None:
		a: Vector = Vector.row([0.1, -2.0, 3.5, 8.0])
		b: Vector = Vector.row([4.0, 0.25, -1.0, 2.0])
		assert a.dot(b) == b.dot(a)

	def test_dot_length_mismatch(self) -> None:
		with pytest.raises(Exceptions.InvalidDimensionsError):
			Vector.fill_column(3).dot(Vector.fill_column(2))

	@pytest.mark.parametrize('operand', [[1.0, 2.0, 3.0], Matrix([[1.0, 2.0, 3.0]])])
	def test_products_require_vectors(self, operand) -> None:
		with pytest.raises(Exceptions.InvalidArgumentException):
			Vector.row([1.0, 2.0, 3.0]).dot(operand)

		with pytest.raises(Exceptions.InvalidArgumentException):
			Vector.row([1.0, 2.0, 3.0]).cross(operand)
