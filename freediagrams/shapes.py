# -*- coding: utf-8 -*-

"""
Free diagrams of fixed shape: multispans, multicospans and parallel morphisms.

A `free diagram`_ in a category is a diagram whose shape is a free category.
Limits and colimits are most commonly taken over free diagrams of a few fixed
shapes, which get their own classes here. Each of them embeds into the
general shape :class:`freediagrams.diagram.FreeDiagram`.

.. _free diagram: https://ncatlab.org/nlab/show/free+diagram

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    FixedFreeDiagram
    Multispan
    Multicospan
    ParallelMorphisms

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        Span
        Cospan
        ParallelPair

Example
-------
>>> from freediagrams.cat import Box
>>> f, g, h = Box('f', 'x', 'y'), Box('g', 'x', 'z'), Box('h', 'y', 'z')
>>> span = Span(f, g)
>>> assert (span.apex, span.left, span.right) == (f.dom, f, g)
>>> assert list(span) == [f, g] and len(span) == 2
>>> diagram = span.to_free_diagram()
>>> assert diagram.obs() == [f.dom, f.cod, g.cod]
>>> assert diagram.homs() == [f, g]

The two-legged shapes are the general ones with two legs, not subclasses.

>>> assert Span(f, g) == Multispan([f, g]) != Multispan([g, f])
>>> assert Cospan(g, h).base == g.cod
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional

from freediagrams import messages
from freediagrams.diagram import FreeDiagram
from freediagrams.utils import (
    Composable,
    ShapeMismatch,
    factory_name,
    is_index,
    assert_allequal,
    assert_inrange,
    assert_nonempty,
    tree_or_value,
    value_from_tree,
)

logger = logging.getLogger(__name__)


class FixedFreeDiagram(ABC):
    """
    Abstract free diagram of fixed shape, i.e. a non-empty tuple of morphisms
    with some common object(s).

    Fixed shapes iterate over their morphisms, have them as length and are
    equal when they have the same class, objects and morphisms in the same
    order. They are immutable.
    """
    _homs: tuple[Composable, ...]

    def __iter__(self) -> Iterator[Composable]:
        yield from self._homs

    def __len__(self) -> int:
        return len(self._homs)

    @property
    @abstractmethod
    def objects(self) -> tuple:
        """ The common objects of the shape, e.g. the apex of a span. """

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other)\
            and self.objects == other.objects and self._homs == other._homs

    def __hash__(self):
        return hash((factory_name(type(self)), self.objects, self._homs))

    @property
    def is_binary(self) -> bool:
        """ Whether the shape has exactly two morphisms. """
        return len(self) == 2

    def _binary(self, i: int) -> Composable:
        if not self.is_binary:
            raise ShapeMismatch(messages.NOT_BINARY.format(
                factory_name(type(self)), self))
        return self._homs[i]

    @abstractmethod
    def to_free_diagram(self) -> FreeDiagram:
        """ The embedding of a fixed shape into the general shape. """

    def to_tree(self) -> dict:
        """ Serialise a fixed shape, see :func:`freediagrams.utils.dumps`. """
        tree = {'factory': factory_name(type(self))}
        for name, value in zip(self._object_names, self.objects):
            tree[name] = tree_or_value(value)
        tree['homs'] = [tree_or_value(f) for f in self._homs]
        return tree

    @classmethod
    def from_tree(cls, tree: dict) -> FixedFreeDiagram:
        """ Decode a serialised fixed shape. """
        homs = tuple(map(value_from_tree, tree['homs']))
        return cls(homs, *(
            value_from_tree(tree[name]) for name in cls._object_names))

    def __repr__(self):
        objects = ", ".join(f"{name}={repr(value)}" for name, value in zip(
            self._object_names, self.objects))
        return factory_name(type(self)) + f"({repr(self._homs)}, {objects})"

    def __str__(self):
        name = self._binary_name if self.is_binary else type(self).__name__
        return f"{name}({', '.join(map(str, self._homs))})"


class Multispan(FixedFreeDiagram):
    """
    A `multispan`_ is a non-empty tuple of morphisms, called legs, with a
    common domain, called apex. A colimit of this shape is a pushout.

    Parameters:
        legs : The legs of the multispan.
        apex : The common domain of the legs, computed if ``None``.

    Raises:
        ShapeMismatch : If there are no legs, or if the apex is not given and
            the legs do not have the same domain.

    Note
    ----
    When the apex is given, it is trusted to be the domain of every leg.

    Example
    -------
    >>> from freediagrams.finset import Function
    >>> f, g = Function((0, 1), 2, 3), Function((1, 1), 2, 2)
    >>> assert Multispan([f, g, f]).apex == 2
    >>> Multispan([f, Function.id(3)])
    Traceback (most recent call last):
    ...
    freediagrams.utils.ShapeMismatch: Domains of legs of multispan do not \
match: Function((0, 1), 2, 3) vs Function((0, 1, 2), 3, 3).

    .. _multispan: https://ncatlab.org/nlab/show/multispan
    """
    _object_names, _binary_name = ("apex", ), "Span"

    def __init__(
            self, legs: Iterable[Composable], apex: Optional[Any] = None):
        legs = tuple(legs)
        assert_nonempty(legs, "leg in a multispan")
        if apex is None:
            assert_allequal([leg.dom for leg in legs], legs,
                            messages.DOMS_DO_NOT_MATCH, "legs of multispan")
            apex = legs[0].dom
        self._apex, self._homs = apex, legs

    @classmethod
    def span(cls, left: Composable, right: Composable) -> Multispan:
        """
        A span of morphisms, i.e. a multispan with two legs, called with
        :func:`Span`.

        Parameters:
            left : The left leg.
            right : The right leg.

        Raises:
            ShapeMismatch : If the domains of the legs do not match.
        """
        if left.dom != right.dom:
            raise ShapeMismatch(messages.DOMS_DO_NOT_MATCH.format(
                "legs of span", left, right))
        return cls((left, right), left.dom)

    @property
    def apex(self):
        """ The common domain of the legs. """
        return self._apex

    @property
    def legs(self) -> tuple[Composable, ...]:
        """ The legs of the multispan. """
        return self._homs

    @property
    def objects(self) -> tuple:
        return (self._apex, )

    @property
    def left(self) -> Composable:
        """ The first leg of a span. """
        return self._binary(0)

    @property
    def right(self) -> Composable:
        """ The second leg of a span. """
        return self._binary(1)

    def to_free_diagram(self) -> FreeDiagram:
        """
        The free diagram with the apex as vertex :code:`0`, then the codomain
        of each leg, and an edge from the apex for each leg, in order.

        Example
        -------
        >>> from freediagrams.cat import Box
        >>> f, g = Box('f', 'x', 'y'), Box('g', 'x', 'z')
        >>> diagram = Span(f, g).to_free_diagram()
        >>> assert diagram.out_edges(0) == [0, 1]
        >>> assert [diagram.tgt(e) for e in diagram.edges] == [1, 2]
        """
        diagram = FreeDiagram()
        apex = diagram.add_vertex(self.apex)
        feet = diagram.add_vertices(leg.cod for leg in self.legs)
        diagram.add_edges(len(self) * [apex], feet, self.legs)
        logger.debug("Converted %s to a free diagram.", self)
        return diagram


class Multicospan(FixedFreeDiagram):
    """
    A multicospan is a non-empty tuple of morphisms, called legs, with a
    common codomain, called base. A limit of this shape is a pullback.

    Parameters:
        legs : The legs of the multicospan.
        base : The common codomain of the legs, computed if ``None``.

    Raises:
        ShapeMismatch : If there are no legs, or if the base is not given and
            the legs do not have the same codomain.

    Example
    -------
    >>> from freediagrams.cat import Box
    >>> f, g = Box('f', 'x', 'z'), Box('g', 'y', 'z')
    >>> cospan = Multicospan([f, g])
    >>> assert cospan == Cospan(f, g) and cospan.base == g.cod
    """
    _object_names, _binary_name = ("base", ), "Cospan"

    def __init__(
            self, legs: Iterable[Composable], base: Optional[Any] = None):
        legs = tuple(legs)
        assert_nonempty(legs, "leg in a multicospan")
        if base is None:
            assert_allequal([leg.cod for leg in legs], legs,
                            messages.CODS_DO_NOT_MATCH, "legs of multicospan")
            base = legs[0].cod
        self._base, self._homs = base, legs

    @classmethod
    def cospan(cls, left: Composable, right: Composable) -> Multicospan:
        """
        A cospan of morphisms, i.e. a multicospan with two legs, called with
        :func:`Cospan`.

        Parameters:
            left : The left leg.
            right : The right leg.

        Raises:
            ShapeMismatch : If the codomains of the legs do not match.
        """
        if left.cod != right.cod:
            raise ShapeMismatch(messages.CODS_DO_NOT_MATCH.format(
                "legs of cospan", left, right))
        return cls((left, right), left.cod)

    @property
    def base(self):
        """ The common codomain of the legs. """
        return self._base

    @property
    def legs(self) -> tuple[Composable, ...]:
        """ The legs of the multicospan. """
        return self._homs

    @property
    def objects(self) -> tuple:
        return (self._base, )

    @property
    def left(self) -> Composable:
        """ The first leg of a cospan. """
        return self._binary(0)

    @property
    def right(self) -> Composable:
        """ The second leg of a cospan. """
        return self._binary(1)

    def to_free_diagram(self) -> FreeDiagram:
        """
        The free diagram with the domain of each leg as vertices, then the
        base as last vertex, and an edge to the base for each leg, in order.

        Example
        -------
        >>> from freediagrams.cat import Box
        >>> f, g = Box('f', 'x', 'z'), Box('g', 'y', 'z')
        >>> diagram = Cospan(f, g).to_free_diagram()
        >>> assert diagram.in_edges(2) == [0, 1]
        >>> assert [diagram.src(e) for e in diagram.edges] == [0, 1]
        """
        diagram = FreeDiagram()
        feet = diagram.add_vertices(leg.dom for leg in self.legs)
        base = diagram.add_vertex(self.base)
        diagram.add_edges(feet, len(self) * [base], self.legs)
        logger.debug("Converted %s to a free diagram.", self)
        return diagram


class ParallelMorphisms(FixedFreeDiagram):
    """
    `Parallel morphisms`_ are a non-empty tuple of morphisms with the same
    domain and codomain. A limit (colimit) of this shape is an equaliser
    (coequaliser).

    Parameters:
        homs : The parallel morphisms.
        dom : Their common domain, computed if ``None``.
        cod : Their common codomain, computed if ``None``.

    Raises:
        ShapeMismatch : If there are no morphisms, or if one of ``dom`` and
            ``cod`` is not given and the morphisms disagree on it.

    Example
    -------
    >>> from freediagrams.finset import Function
    >>> f, g = Function((0, 1), 2, 3), Function((0, 2), 2, 3)
    >>> para = ParallelMorphisms([f, g, g])
    >>> assert (para.dom, para.cod, para.hom) == (2, 3, (f, g, g))
    >>> assert para[0] == f and para[para.last_index] == para[-1] == g
    >>> para[3]
    Traceback (most recent call last):
    ...
    freediagrams.utils.IndexOutOfRange: Parallel morphisms index 3 out of \
range(-3, 3).

    .. _Parallel morphisms: https://ncatlab.org/nlab/show/parallel+morphisms
    """
    _object_names, _binary_name = ("dom", "cod"), "ParallelPair"

    def __init__(self, homs: Iterable[Composable],
                 dom: Optional[Any] = None, cod: Optional[Any] = None):
        homs = tuple(homs)
        assert_nonempty(homs, "morphism in parallel morphisms")
        if dom is None:
            assert_allequal([f.dom for f in homs], homs,
                            messages.DOMS_DO_NOT_MATCH, "parallel morphisms")
            dom = homs[0].dom
        if cod is None:
            assert_allequal([f.cod for f in homs], homs,
                            messages.CODS_DO_NOT_MATCH, "parallel morphisms")
            cod = homs[0].cod
        self._dom, self._cod, self._homs = dom, cod, homs

    @classmethod
    def pair(cls, first: Composable, last: Composable) -> ParallelMorphisms:
        """
        A pair of parallel morphisms, called with :func:`ParallelPair`.

        Parameters:
            first : The first morphism.
            last : The last morphism.

        Raises:
            ShapeMismatch : If either the domains or the codomains differ.
        """
        if first.dom != last.dom:
            raise ShapeMismatch(messages.DOMS_DO_NOT_MATCH.format(
                "parallel pair", first, last))
        if first.cod != last.cod:
            raise ShapeMismatch(messages.CODS_DO_NOT_MATCH.format(
                "parallel pair", first, last))
        return cls((first, last), first.dom, first.cod)

    @property
    def dom(self):
        """ The common domain of the morphisms. """
        return self._dom

    @property
    def cod(self):
        """ The common codomain of the morphisms. """
        return self._cod

    @property
    def hom(self) -> tuple[Composable, ...]:
        """ The parallel morphisms themselves. """
        return self._homs

    @property
    def objects(self) -> tuple:
        return (self._dom, self._cod)

    @property
    def first_index(self) -> int:
        return 0

    @property
    def last_index(self) -> int:
        return len(self) - 1

    def __getitem__(self, key: int) -> Composable:
        if not is_index(key):
            raise TypeError(messages.TYPE_ERROR.format(
                "int", factory_name(type(key))))
        assert_inrange(
            key, range(-len(self), len(self)), "Parallel morphisms")
        return self._homs[key]

    def to_free_diagram(self) -> FreeDiagram:
        """
        The free diagram with two vertices :code:`dom` and :code:`cod` and an
        edge from one to the other for each morphism, in order.

        Example
        -------
        >>> from freediagrams.finset import Function
        >>> f, g = Function((0, 1), 2, 3), Function((0, 2), 2, 3)
        >>> diagram = ParallelPair(f, g).to_free_diagram()
        >>> assert diagram.obs() == [2, 3] and diagram.homs() == [f, g]
        """
        diagram = FreeDiagram()
        dom, cod = diagram.add_vertices((self.dom, self.cod))
        diagram.add_edges(len(self) * [dom], len(self) * [cod], self.hom)
        logger.debug("Converted %s to a free diagram.", self)
        return diagram


Span = Multispan.span
Cospan = Multicospan.cospan
ParallelPair = ParallelMorphisms.pair
