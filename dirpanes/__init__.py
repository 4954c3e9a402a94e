"""Public package surface for dirpanes.

Exports ``main`` for programmatic CLI invocation. The navigation core lives in
``dirpanes.listing`` and ``dirpanes.pane``; the terminal shell in
``dirpanes.runtime`` and ``dirpanes.render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
