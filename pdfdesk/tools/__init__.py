"""Namespace for pluggable pdfdesk tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .merger import merge  # noqa: F401
    from .splitter import split  # noqa: F401
    from .organizer import organize  # noqa: F401
    from .compressor import compress  # noqa: F401
    from .converter import images  # noqa: F401
    from .protection import protect  # noqa: F401
    from .inspector import info  # noqa: F401
    from .files import save  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
