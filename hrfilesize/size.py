import math
from collections.abc import Sequence
from typing import NamedTuple

from loguru import logger

from hrfilesize.config import POWER_MAX, Config, Options, resolve
from hrfilesize.errors import FileSizeRangeError, InvalidArgumentError
from hrfilesize.reducer import check_size, reduce


class HumanReadableSize(NamedTuple):
    value: float
    unit: str

    def render(self, output_format: str = '%.1f') -> str:
        return f'{output_format % self.value} {self.unit}'

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def parse(cls, text: str) -> 'HumanReadableSize':
        """Read a rendered size such as `"10.0 KB"` back into its pair."""
        try:
            value, unit = text.split()
            size = cls(float(value), unit)
        except ValueError as e:
            msg = f'Cannot read {text!r} as "<value> <unit>"'
            raise InvalidArgumentError(msg) from e

        return size.check_finite()

    @classmethod
    def coerce(
        cls, size: 'str | Sequence | HumanReadableSize'
    ) -> 'HumanReadableSize':
        if isinstance(size, cls):
            return size.check_finite()

        if isinstance(size, str):
            return cls.parse(size)

        try:
            value, unit = size
            size = cls(float(value), str(unit))
        except (TypeError, ValueError) as e:
            msg = f'Expected a (value, unit) pair, got {size!r}'
            raise InvalidArgumentError(msg) from e

        return size.check_finite()

    def check_finite(self) -> 'HumanReadableSize':
        # nan and inf have no place in a total order of sizes
        if not math.isfinite(self.value):
            msg = f'Size value must be finite, got {self.value!r} {self.unit}'
            raise InvalidArgumentError(msg)

        return self


def _human_readable(size: int, config: Config) -> HumanReadableSize:
    size = check_size(size)

    # two units past the largest one; also well inside the range of a double
    if size >= config.base ** (POWER_MAX + 2):
        raise FileSizeRangeError(
            POWER_MAX + 2,
            message='File size larger than the maximum available size unit '
            '(power: >= {})',
        )

    value, power = reduce(size, config)

    if power > POWER_MAX:
        raise FileSizeRangeError(power)

    return HumanReadableSize(value, config.units[power])


def human_readable(
    size: int, options: Options = (), /, **kwargs
) -> HumanReadableSize:
    """
    Convert a size in bytes into a `(value, unit)` pair.

    Overrides (`unit_system`, `output_format`, `numeric_backend`) apply to this
    call only.
    """
    return _human_readable(size, resolve(options, **kwargs))


def bytes_to_hr(size: int, options: Options = (), /, **kwargs) -> str:
    """
    Convert a size in bytes into a human-readable string.

    >>> bytes_to_hr(10000)
    '10.0 KB'
    >>> bytes_to_hr(1024, unit_system='binary')
    '1.0 KiB'

    Parameters
    ----------
    size : int
        Non-negative number of bytes.
    options : Options, optional
        One-off overrides as a mapping or `(key, value)` pairs.
    **kwargs
        One-off overrides as keyword arguments. Neither form changes the
        process-wide configuration.

    Returns
    -------
    str
        `"<value> <unit>"`, the value rendered with `output_format`.

    Raises
    ------
    InvalidArgumentError
        Negative or non-integral size, or invalid override.
    FileSizeRangeError
        The size needs a unit larger than exa.
    """
    config = resolve(options, **kwargs)
    return _human_readable(size, config).render(config.output_format)


to_human_readable = bytes_to_hr


def compare(
    a: str | Sequence | HumanReadableSize,
    b: str | Sequence | HumanReadableSize,
    options: Options = (),
    /,
    **kwargs,
) -> int:
    """
    Compare two human-readable sizes of the same unit system.

    Sizes with the same unit compare by value. Otherwise only the rank of the
    unit decides, e.g. `(999.0, "KB") < (1.0, "MB")` but also
    `(0.0, "KB") < (0.1, "MB")`.

    Returns
    -------
    int
        -1, 0 or 1 when `a` is less than, equal to or greater than `b`.
    """
    config = resolve(options, **kwargs)
    a = HumanReadableSize.coerce(a)
    b = HumanReadableSize.coerce(b)

    if a.unit == b.unit:
        if a.value < b.value:
            return -1
        if a.value == b.value:
            return 0
        return 1

    try:
        ra = config.units.index(a.unit)
        rb = config.units.index(b.unit)
    except ValueError as e:
        msg = (
            f'The current unit system "{config.unit_system}" does not match '
            f'the given units for {a} and {b} (unit system mismatch)'
        )
        raise InvalidArgumentError(msg) from e

    logger.trace('rank {}={} | rank {}={}', a.unit, ra, b.unit, rb)

    return -1 if ra < rb else 1
