import io
import sys
import typing

from LinAlg.Logger import Logger, LogLevel
from LinAlg.Math.Matrix import Matrix
from LinAlg.Math.Vector import Vector
from LinAlg import Exceptions


def solve(b: Matrix, e: Matrix, log: Logger) -> Matrix:
	"""
	Solves A * B = E for A by right-multiplying with the inverse of B
	:param b: The known right factor
	:param e: The known product
	:param log: The log writer
	:return: The solved left factor
	:raises NoInverseError: If 'b' is singular
	"""

	log.debug(f'Inverting {b!r} (determinant {b.determinant()})')
	return e * b.inverted()


def main(stream: typing.Optional[io.IOBase] = None) -> int:
	with Logger(sys.stdout if stream is None else stream, level=LogLevel.DEBUG) as log:
		a: Matrix = Matrix([[1.0, 2.0], [3.0, 4.0]])
		b: Matrix = Matrix([[2.0, 0.0], [1.0, 2.0]])
		e: Matrix = Matrix([[4.0, 4.0], [10.0, 8.0]])

		try:
			solved: Matrix = solve(b, e, log)
		except Exceptions.NoInverseError as err:
			log.error(err)
			return 1

		log.info(f'The calculated A = {solved}, the expected A is {a}, they are {"" if solved == a else "not "}the same')
		log.info(f'A * 3 = {a * 3.0}')
		log.info(f'A * 3 + B = {a * 3.0 + b}')
		log.info(f'The determinant of A = {a.determinant()}')

		u: Vector = Vector.column([2.0, 3.0, 4.0])
		v: Vector = Vector.column([5.0, 6.0, 7.0])
		log.info(f'u x v = {list(u.cross(v))}, u . v = {u.dot(v)}')

		try:
			Matrix([[1.0, 2.0], [2.0, 4.0]]).inverted()
		except Exceptions.NoInverseError as err:
			log.warn(f'Singular matrix: {err}')

	return 0


if __name__ == '__main__':
	sys.exit(main())
