"""Helpers for code that may run under torch.compile or TorchScript tracing."""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import torch

T = TypeVar("T")


def is_tracing() -> bool:
    """Return True while torch.compile or the TorchScript tracer runs the caller."""
    return bool(torch.compiler.is_compiling() or torch.jit.is_tracing())


def validation_hook(check: Callable[[T], None]) -> Callable[[T], None]:
    """Wrap a ``__post_init__`` shape check so it only runs eagerly.

    The checks branch on tensor sizes, which would break the graph of a
    compiled compositing step.
    """

    @wraps(check)
    def run(instance: T) -> None:
        if is_tracing():
            return
        check(instance)

    return run
