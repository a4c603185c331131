from .console import cnsl, level_no, set_logger

__all__ = ['cnsl', 'level_no', 'set_logger']
