"""Reduce a byte count to `(value, power)` such that `size = value * base**power`."""

import decimal
import operator
from abc import ABC, abstractmethod
from typing import ClassVar, NamedTuple

from loguru import logger

from hrfilesize.config import Config, NumericBackend, get_config
from hrfilesize.errors import InvalidArgumentError


class Reduced(NamedTuple):
    value: float
    power: int


class Reducer(ABC):
    BACKEND: ClassVar[NumericBackend]

    @abstractmethod
    def reduce(self, size: int, base: int) -> Reduced:
        pass


class FloatReducer(Reducer):
    """
    Native double-precision division.

    Sizes beyond the range of a double raise `OverflowError`.
    """

    BACKEND = NumericBackend.STANDARD

    def reduce(self, size: int, base: int) -> Reduced:
        y = float(size)
        k = float(base)
        power = 0

        while y >= k:
            y /= k
            power += 1

        return Reduced(y, power)


class DecimalReducer(Reducer):
    """
    `decimal.Decimal` division with a precision wide enough for the whole input.

    Only the final value is converted to `float`.
    """

    BACKEND = NumericBackend.ARBITRARY
    GUARD_DIGITS: ClassVar[int] = 34

    @classmethod
    def precision(cls, size: int) -> int:
        # log10(2) ~ 0.30103
        return size.bit_length() * 30103 // 100000 + 1 + cls.GUARD_DIGITS

    def reduce(self, size: int, base: int) -> Reduced:
        with decimal.localcontext() as ctx:
            ctx.prec = self.precision(size)

            y = decimal.Decimal(size)
            k = decimal.Decimal(base)
            power = 0

            while y >= k:
                y /= k
                power += 1

            return Reduced(float(y), power)


REDUCERS: dict[NumericBackend, Reducer] = {
    r.BACKEND: r for r in (FloatReducer(), DecimalReducer())
}


def check_size(size) -> int:
    if isinstance(size, bool):
        msg = f'size must be an integer, not {size!r}'
        raise InvalidArgumentError(msg)

    try:
        size = operator.index(size)
    except TypeError as e:
        msg = f'size must be an integer, not {type(size).__name__}'
        raise InvalidArgumentError(msg) from e

    if size < 0:
        msg = f'size must be non-negative: {size}'
        raise InvalidArgumentError(msg)

    return size


def reduce(size: int, config: Config | None = None) -> Reduced:
    """
    Divide `size` by the unit base until it falls below the base.

    The power is not bounded here; rendering decides which powers have a unit.
    """
    size = check_size(size)
    config = config or get_config()

    reduced = REDUCERS[config.numeric_backend].reduce(size, config.base)
    logger.trace(
        'size={} base={} backend={} -> {}',
        size,
        config.base,
        config.numeric_backend,
        reduced,
    )

    return reduced
