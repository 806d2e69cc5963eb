"""
Flatten functions for the Chamber of Deputies records served by the app.

Re-exports every public flatten function so callers can import from the
top-level package without knowing which submodule a function lives in:

    from deputados.transforms import flatten_deputado, flatten_despesa
    # equivalent to:
    from deputados.transforms.deputados import flatten_deputado

Each submodule corresponds to one data domain and contains only pure
dict-in / dict-out transformation functions — no I/O, no API calls.
"""

from .deputados import flatten_deputado
from .despesas import flatten_despesa
from .eventos import flatten_evento
from .frentes import flatten_frente

__all__ = [
    "flatten_deputado",
    "flatten_despesa",
    "flatten_evento",
    "flatten_frente",
]
