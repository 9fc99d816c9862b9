"""curlgen — KeyStudio transcripts and tools to ready-to-run chat-completion requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from curlgen.core.conversion.payload import convert as convert
    from curlgen.sdk.generator import CurlGenerator as CurlGenerator

_LAZY_EXPORTS = {
    "CurlGenerator": "curlgen.sdk.generator",
    "convert": "curlgen.core.conversion.payload",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'curlgen' has no attribute {name!r}")
