from __future__ import annotations

import datetime
import enum
import io
import typing

from . import Exceptions


class LogLevel(enum.IntEnum):
	"""
	Severity levels accepted by 'Logger', ordered from least to most severe
	"""

	DEBUG = 0
	INFO = 1
	WARN = 2
	ERROR = 3
	CRITICAL = 4


class Logger:
	"""
	Class representing a log writer over an open text stream
	"""

	def __init__(self, stream: io.IOBase, timezone: datetime.timezone = datetime.timezone.utc, level: LogLevel = LogLevel.DEBUG):
		"""
		Class representing a log writer over an open text stream
		- Constructor -
		:param stream: The stream to write results to
		:param timezone: The timezone to stamp messages with
		:param level: The minimum level a message needs to be written
		:raises InvalidArgumentException: If any argument is of the wrong type
		:raises IOError: If the stream is closed or not writable
		"""

		if not isinstance(stream, io.IOBase):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'stream', type(stream), (io.IOBase,))
		elif not isinstance(timezone, datetime.timezone):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'timezone', type(timezone), (datetime.timezone,))
		elif not isinstance(level, LogLevel):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'level', type(level), (LogLevel,))

		if stream.closed:
			raise IOError('Stream is closed')
		elif not stream.writable():
			raise IOError('Target stream is not writable')

		self.__stream__: typing.Optional[io.IOBase] = stream
		self.__timezone__: datetime.timezone = timezone
		self.__level__: LogLevel = level
		self.__stream__.write('==========[ Log Opened ]==========\n\n')

	def __enter__(self) -> Logger:
		return self

	def __exit__(self, exc_type, exc_val, exc_tb) -> None:
		if self.__stream__ is not None:
			self.detach()

	def __write__(self, level: LogLevel, msg: typing.Any) -> Logger:
		"""
		INTERNAL METHOD
		Writes a single stamped line if 'level' passes this log's threshold
		:param level: The message level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		if self.__stream__ is None:
			raise IOError('Log is closed')
		elif level < self.__level__:
			return self

		timestamp: str = datetime.datetime.now(self.__timezone__).strftime('%m/%d/%Y %H:%M:%S.%f')
		self.__stream__.write(f'{timestamp} [ {self.__timezone__} ] [ {level.name} ]: {str(msg).strip()}\n')
		return self

	def close(self) -> None:
		"""
		Closes the log writer and the underlying stream
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		stream: io.IOBase = self.__release__()
		stream.flush()
		stream.close()

	def detach(self) -> None:
		"""
		Detaches the log writer
		The underlying stream is not closed
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		self.__release__().flush()

	def __release__(self) -> io.IOBase:
		if self.__stream__ is None:
			raise IOError('Log is closed')

		stream: io.IOBase = self.__stream__
		stream.write('\n==========[ Log Closed ]==========\n')
		self.__stream__ = None
		return stream

	def debug(self, msg: typing.Any) -> Logger:
		return self.__write__(LogLevel.DEBUG, msg)

	def info(self, msg: typing.Any) -> Logger:
		return self.__write__(LogLevel.INFO, msg)

	def warn(self, msg: typing.Any) -> Logger:
		return self.__write__(LogLevel.WARN, msg)

	def error(self, msg: typing.Any) -> Logger:
		return self.__write__(LogLevel.ERROR, msg)

	def critical(self, msg: typing.Any) -> Logger:
		return self.__write__(LogLevel.CRITICAL, msg)

	@property
	def closed(self) -> bool:
		"""
		:return: Whether this log writer can no longer be written to
		"""

		return self.__stream__ is None

	@property
	def level(self) -> LogLevel:
		return self.__level__
