"""Process-wide conversion settings."""

import dataclasses as dc
import threading
from collections.abc import Iterable, Mapping
from enum import StrEnum
from itertools import chain
from typing import Any, ClassVar

from loguru import logger

from hrfilesize.errors import InvalidArgumentError

Options = Mapping[str, Any] | Iterable[tuple[str, Any]]

# kilo, mega, giga, tera, peta, exa
PREFIXES = ('K', 'M', 'G', 'T', 'P', 'E')
POWER_MAX = len(PREFIXES)


class UnitSystem(StrEnum):
    DECIMAL = 'decimal'
    BINARY = 'binary'

    @property
    def base(self) -> int:
        return 1024 if self is UnitSystem.BINARY else 1000

    @property
    def units(self) -> tuple[str, ...]:
        suffix = 'iB' if self is UnitSystem.BINARY else 'B'
        return ('B', *(f'{p}{suffix}' for p in PREFIXES))


class NumericBackend(StrEnum):
    STANDARD = 'standard'
    ARBITRARY = 'arbitrary-precision'


def _enum(cls: type[StrEnum], key: str, value):
    try:
        return cls(value)
    except ValueError as e:
        msg = f'Unknown {key} {value!r} (expected one of {[str(x) for x in cls]})'
        raise InvalidArgumentError(msg) from e


def _check_format(fmt) -> str:
    if not isinstance(fmt, str):
        msg = f'output_format must be a str, not {type(fmt).__name__}'
        raise InvalidArgumentError(msg)

    try:
        fmt % 1.0  # noqa: B018
    except (TypeError, ValueError) as e:
        msg = f'output_format {fmt!r} cannot render a single float'
        raise InvalidArgumentError(msg) from e

    return fmt


def _items(options: Options) -> Iterable[tuple[str, Any]]:
    return options.items() if isinstance(options, Mapping) else options


@dc.dataclass(frozen=True)
class Config:
    unit_system: UnitSystem = UnitSystem.DECIMAL
    output_format: str = '%.1f'
    numeric_backend: NumericBackend = NumericBackend.ARBITRARY

    KEYS: ClassVar[tuple[str, ...]] = (
        'unit_system',
        'output_format',
        'numeric_backend',
    )

    def __post_init__(self):
        # frozen; coerce plain strings into enum members
        for key, cls in [
            ('unit_system', UnitSystem),
            ('numeric_backend', NumericBackend),
        ]:
            object.__setattr__(self, key, _enum(cls, key, getattr(self, key)))

        _check_format(self.output_format)

    @property
    def base(self) -> int:
        return self.unit_system.base

    @property
    def units(self) -> tuple[str, ...]:
        return self.unit_system.units

    def replace(self, options: Options = (), /, **kwargs) -> 'Config':
        """
        Return a copy with the given overrides applied.

        Overrides are applied in order, the last value of a key wins. Every value
        is validated before the copy is returned, so an invalid option never
        yields a partially updated configuration.
        """
        changes: dict[str, Any] = {}
        for key, value in chain(_items(options), kwargs.items()):
            if key not in self.KEYS:
                msg = f'Unknown key {key!r}'
                raise InvalidArgumentError(msg)

            changes[key] = value

        return dc.replace(self, **changes) if changes else self


DEFAULT = Config()


class _ConfigStore:
    def __init__(self, config: Config = DEFAULT) -> None:
        self._lock = threading.Lock()
        self._config = config

    @property
    def config(self) -> Config:
        with self._lock:
            return self._config

    def configure(self, options: Options = (), /, **kwargs) -> None:
        with self._lock:
            self._config = self._config.replace(options, **kwargs)
            config = self._config

        logger.debug(
            'unit_system={} | output_format={!r} | numeric_backend={}',
            config.unit_system,
            config.output_format,
            config.numeric_backend,
        )

    def reset(self) -> None:
        with self._lock:
            self._config = DEFAULT


_store = _ConfigStore()


def get_config() -> Config:
    return _store.config


def configure(options: Options = (), /, **kwargs) -> None:
    """
    Update the process-wide configuration.

    Parameters
    ----------
    options : Options, optional
        Mapping or iterable of `(key, value)` pairs.
    **kwargs
        Same keys as keyword arguments, applied after `options`:
        `unit_system` ("decimal", "binary"), `output_format` (printf-style float
        template, e.g. "%.1f") and `numeric_backend` ("standard",
        "arbitrary-precision").
    """
    _store.configure(options, **kwargs)


def reset() -> None:
    _store.reset()


def resolve(options: Options = (), /, **kwargs) -> Config:
    """Current configuration with one-off overrides; the store is left untouched."""
    return _store.config.replace(options, **kwargs)
