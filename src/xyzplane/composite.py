"""Fixed-arity tuple adapters.

Points and vectors cross the numeric backend boundary as flat sequences of
coordinates. These helpers convert 2- and 3-tuples to and from such
sequences.
"""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator, List, Optional, Tuple

ARITIES = (2, 3)


def _check_arity(arity: int) -> None:
    if arity not in ARITIES:
        raise ValueError(f"Unsupported arity {arity}; expected one of {ARITIES}")


def decompose(items: Tuple[Any, ...]) -> List[Any]:
    """Flatten a 2- or 3-tuple into a list, preserving order."""
    _check_arity(len(items))
    return list(items)


def recompose(items: Iterable[Any], arity: int) -> Optional[Tuple[Any, ...]]:
    """Build an ``arity``-tuple from the first ``arity`` items of ``items``.

    Parameters
    ----------
    items : Iterable
        Any iterable. Only ``arity`` items are consumed; anything after
        them is left untouched in the underlying iterator.
    arity : int
        2 or 3.

    Returns
    -------
    tuple or None
        None if fewer than ``arity`` items are available.
    """
    _check_arity(arity)
    taken = tuple(islice(iter(items), arity))
    if len(taken) < arity:
        return None
    return taken


def compose(iterator: Iterator[Any], arity: int) -> Optional[Tuple[Any, ...]]:
    """Pull one ``arity``-tuple off an iterator (see :func:`recompose`)."""
    return recompose(iterator, arity)


def converge(value: Any, arity: int) -> Tuple[Any, ...]:
    """Tuple repeating ``value`` in every position (uniform scale factors etc.)."""
    _check_arity(arity)
    return (value,) * arity
