from inspect import getsourcefile, getsourcelines
from os.path import basename
from re import IGNORECASE, compile
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import call_depth_var, chain_start_time_var


# Key material a caller might pass through a ledger call; never written to a sink
SENSITIVE_KEYWORDS = frozenset({'password', 'private_key', 'signature'})
MASK = '********'
MAX_CONTENT_LENGTH = 500

_SENSITIVE_PATTERN = compile(
    rf"({'|'.join(sorted(SENSITIVE_KEYWORDS))})(=|': ?)('[^']*'|\"[^\"]*\"|[^,)\s]+)",
    IGNORECASE,
)


def enter_call_chain() -> float:
    """Bump the nesting depth and return the start time of the outermost call"""
    call_depth_var.set(call_depth_var.get() + 1)
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def leave_call_chain() -> None:
    depth = call_depth_var.get() - 1
    call_depth_var.set(depth)
    if depth <= 0:
        chain_start_time_var.set(0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        filename = basename(getsourcefile(target) or '?')
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        filename, lineno = '?', 0
    return f'{filename}::{func.__qualname__}:{lineno}'


def mask_sensitive(data: Any) -> Any:
    data_str = str(data)
    masked = _SENSITIVE_PATTERN.sub(rf"\1\2'{MASK}'", data_str)
    return data if data_str == masked else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    data_str = data if isinstance(data, str) else repr(data)
    if len(data_str) <= max_length:
        return data
    return f'{data_str[:max_length]}... (truncated {len(data_str) - max_length} chars)'
