"""Convert byte counts into human-readable sizes and compare them."""

from loguru import logger

from .config import (
    DEFAULT,
    POWER_MAX,
    Config,
    NumericBackend,
    UnitSystem,
    configure,
    get_config,
    reset,
)
from .errors import FileSizeRangeError, InvalidArgumentError
from .reducer import Reduced, reduce
from .size import (
    HumanReadableSize,
    bytes_to_hr,
    compare,
    human_readable,
    to_human_readable,
)

logger.disable(__name__)

__version__ = '1.0.0'
__all__ = [
    'DEFAULT',
    'POWER_MAX',
    'Config',
    'FileSizeRangeError',
    'HumanReadableSize',
    'InvalidArgumentError',
    'NumericBackend',
    'Reduced',
    'UnitSystem',
    'bytes_to_hr',
    'compare',
    'configure',
    'get_config',
    'human_readable',
    'reduce',
    'reset',
    'to_human_readable',
]
