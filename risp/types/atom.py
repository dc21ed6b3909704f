from __future__ import annotations


class Atom:
    """Base class for self-evaluating leaf values.

    Atoms are immutable and hashable, so they can key a Map or sit in a Set.
    """

    __slots__ = ()
