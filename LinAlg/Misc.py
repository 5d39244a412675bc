from . import Exceptions


def raise_if(expression: bool, exception: BaseException) -> None:
	"""
	Raises an exception if the expression evaluates to True
	:param expression: The expression to evaluate
	:param exception: The exception to raise
	:raises InvalidArgumentException: If 'exception' is not an exception
	"""

	if not isinstance(exception, BaseException):
		raise Exceptions.InvalidArgumentException(raise_if, 'exception', type(exception), (BaseException,))
	elif expression:
		raise exception


def raise_ifn(expression: bool, exception: BaseException) -> None:
	"""
	Raises an exception if the expression evaluates to False
	:param expression: The expression to evaluate
	:param exception: The exception to raise
	:raises InvalidArgumentException: If 'exception' is not an exception
	"""

	if not isinstance(exception, BaseException):
		raise Exceptions.InvalidArgumentException(raise_ifn, 'exception', type(exception), (BaseException,))
	elif not expression:
		raise exception


def dimension_string(rows: int, columns: int) -> str:
	return f'{rows}x{columns}'
