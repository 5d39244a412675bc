import typing
import types


class InvalidArgumentException(TypeError):
	"""
	[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
	"""

	def __init__(self, caller: typing.Callable | types.FunctionType | types.MethodType = None, parameter_name: str = None, argument_type: type = None, parameter_types: typing.Iterable[type | str] = None):
		"""
		[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
		- Constructor -
		:param caller: The callable that raised this exception
		:param parameter_name: The name of the parameter
		:param argument_type: The type of the argument passed in
		:param parameter_types: The types this parameter accepts
		"""

		if caller is None or parameter_name is None or argument_type is None:
			super().__init__()
			return

		accepted: tuple[str, ...] = ('<UNKNOWN>',) if parameter_types is None else tuple(f'\'{x.__name__ if isinstance(x, type) else x}\'' for x in parameter_types)
		type_list: str = f'either {", ".join(accepted[:-1])} or {accepted[-1]}' if len(accepted) > 1 else accepted[0]
		callable_type: str = 'Method' if '.' in caller.__qualname__ else 'Function'
		super().__init__(f'{callable_type} {caller.__qualname__.replace(".", "::")} - parameter \'{parameter_name}\' must be {type_list}; got \'{argument_type.__name__}\'')


class MatrixException(Exception):
	"""
	[MatrixException(Exception)] - Base exception for all matrix and vector failures
	"""

	def __init__(self, what: str = ''):
		"""
		[MatrixException(Exception)] - Base exception for all matrix and vector failures
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)
		self.cause: str = what


class InvalidDimensionsError(MatrixException, ValueError):
	"""
	[InvalidDimensionsError(MatrixException, ValueError)] - Exception representing operand shapes invalid for an operation
	"""

	def __init__(self, what: str = 'Invalid dimensions'):
		super().__init__(what)


class UnsupportedOperationError(MatrixException, TypeError):
	"""
	[UnsupportedOperationError(MatrixException, TypeError)] - Exception representing an operation not supported for the operand
	"""

	def __init__(self, what: str = 'Unsupported operation'):
		super().__init__(what)


class NoInverseError(MatrixException, ArithmeticError):
	"""
	[NoInverseError(MatrixException, ArithmeticError)] - Exception representing an inversion of a singular matrix
	"""

	def __init__(self, what: str = 'No inverse for this matrix'):
		super().__init__(what)
