# -*- coding: utf-8 -*-

"""
The category of finite sets, with natural numbers as objects and functions
encoded as tuples of images.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Function

Example
-------
The finite sets :code:`2` and :code:`3` with two functions between them make
a parallel pair, i.e. the shape of an equaliser.

>>> from freediagrams.shapes import ParallelPair
>>> f, g = Function((0, 1), 2, 3), Function((0, 2), 2, 3)
>>> pair = ParallelPair(f, g)
>>> assert (pair.dom, pair.cod) == (2, 3)
"""

from __future__ import annotations

from dataclasses import dataclass

from freediagrams.utils import (
    Composable, assert_isinstance, assert_iscomposable, factory_name)


@dataclass(frozen=True)
class Function(Composable[int]):
    """
    A function between finite sets encoded as a Python tuple.

    Parameters:
        inside : The images of :code:`range(dom)`, each in :code:`range(cod)`.
        dom : The size of the domain of the function.
        cod : The size of the codomain of the function.

    Raises:
        TypeError : If ``dom`` or ``cod`` is not a natural number.
        ValueError : If ``inside`` is not a function from ``dom`` to ``cod``.

    .. admonition:: Summary

        .. autosummary::

            id
            then
            tensor
            swap
            merge

    Example
    -------
    >>> f = Function((1, 0, 1), 3, 2)
    >>> assert f(0) == 1 and f >> Function.id(2) == f
    >>> Function((2, ), 1, 2)
    Traceback (most recent call last):
    ...
    ValueError: Expected a function from 1 to 2, got (2,) instead.
    """
    inside: tuple[int, ...]
    dom: int
    cod: int

    def __post_init__(self):
        assert_isinstance(self.dom, int)
        assert_isinstance(self.cod, int)
        object.__setattr__(self, "inside", tuple(self.inside))
        if self.dom < 0 or self.cod < 0 or len(self.inside) != self.dom\
                or any(not 0 <= i < self.cod for i in self.inside):
            raise ValueError(
                f"Expected a function from {self.dom} to {self.cod}, "
                f"got {self.inside} instead.")

    def __call__(self, i: int) -> int:
        return self.inside[i]

    def __str__(self):
        return f"Function({self.inside}, {self.dom}, {self.cod})"

    @staticmethod
    def id(x: int = 0) -> Function:
        """ The identity function on :code:`range(x)`. """
        return Function(tuple(range(x)), x, x)

    def then(self, other: Function) -> Function:
        """
        Composition of functions, in diagrammatic order.

        Example
        -------
        >>> f, g = Function((0, 0), 2, 1), Function((1, ), 1, 2)
        >>> assert f >> g == Function((1, 1), 2, 2)
        """
        assert_isinstance(other, Function)
        assert_iscomposable(self, other)
        return Function(
            tuple(other(i) for i in self.inside), self.dom, other.cod)

    def tensor(self, other: Function) -> Function:
        """ The disjoint union of two functions. """
        inside = self.inside + tuple(self.cod + i for i in other.inside)
        return Function(inside, self.dom + other.dom, self.cod + other.cod)

    @staticmethod
    def swap(x: int, y: int) -> Function:
        """ The symmetry from :code:`x + y` to :code:`y + x`. """
        inside = tuple(i + y if i < x else i - x for i in range(x + y))
        return Function(inside, x + y, x + y)

    @staticmethod
    def merge(x: int, n: int = 2) -> Function:
        """
        The codiagonal from :code:`n` copies of :code:`x` to :code:`x`.

        Example
        -------
        >>> assert Function.merge(2) == Function((0, 1, 0, 1), 4, 2)
        """
        return Function(tuple(i % x for i in range(n * x)), n * x, x)

    def to_tree(self) -> dict:
        """
        Serialise a function, see :func:`freediagrams.utils.dumps`.

        Example
        -------
        >>> Function((0, 2), 2, 3).to_tree()
        {'factory': 'finset.Function', 'inside': [0, 2], 'dom': 2, 'cod': 3}
        """
        return {
            'factory': factory_name(type(self)),
            'inside': list(self.inside), 'dom': self.dom, 'cod': self.cod}

    @classmethod
    def from_tree(cls, tree: dict) -> Function:
        """ Decode a serialised function. """
        return cls(tuple(tree['inside']), tree['dom'], tree['cod'])
