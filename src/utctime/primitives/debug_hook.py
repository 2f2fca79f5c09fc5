"""
Debug Hook Primitive

Side channel for diagnostics. The hook is a no-op until a caller installs one,
and nothing it does can change a value returned by utctime.
"""

from typing import Callable, Optional

from utctime.primitives.logger import Logger

DebugHook = Callable[[str, dict], None]

_hook: Optional[DebugHook] = None
_logger: Optional[Logger] = None


def set_debug_hook(hook: Optional[DebugHook]) -> Optional[DebugHook]:
    """
    Install a debug hook, replacing the current one.

    Args:
        hook: Callable receiving ``(message, context)``, or None for the no-op sink

    Returns:
        The previously installed hook (None when it was the no-op sink)
    """
    global _hook
    previous = _hook
    _hook = hook
    return previous


def get_debug_hook() -> Optional[DebugHook]:
    """Return the installed hook, or None when debugging is off."""
    return _hook


def debug_log(message: str, context: Optional[dict] = None) -> None:
    """Forward a message to the installed hook, if any."""
    hook = _hook
    if hook is None:
        return
    hook(message, context if context is not None else {})


def enable_debug_logging(output_file: Optional[str] = None) -> Logger:
    """
    Route debug messages to a structured Logger.

    Args:
        output_file: Optional log file path. Logs go to stderr when omitted.

    Returns:
        Logger: The logger now backing the hook
    """
    global _logger
    disable_debug_logging()
    _logger = Logger(output_file=output_file)
    set_debug_hook(_logger.debug)
    return _logger


def disable_debug_logging() -> None:
    """Restore the no-op sink and release any logger opened by enable_debug_logging."""
    global _logger
    set_debug_hook(None)
    if _logger is not None:
        _logger.close()
        _logger = None
