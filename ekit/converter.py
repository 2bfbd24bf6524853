"""Converters that turn a field value of one type into another."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Converter(ABC):
    """Turns a value of one type into a value of another."""

    @abstractmethod
    def convert(self, src):
        """Return the converted form of ``src``, raising if it cannot be converted."""


class ConverterFunc(Converter):
    """A converter backed by a plain function."""

    def __init__(self, func):
        self._func = func

    def convert(self, src):
        return self._func(src)


@dataclass(frozen=True)
class Time2String(Converter):
    """Formats a date or datetime with an ``strftime`` pattern."""

    pattern: str

    def convert(self, src):
        return src.strftime(self.pattern)