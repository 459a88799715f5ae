# -*- coding: utf-8 -*-

"""
The free category on named boxes, and the functors that act on free diagrams
and decorate cospans.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Ob
    Box
    Path
    AbstractFunctor
    AbstractLaxator
    Functor
    LaxMonoidalFunctor

Free diagrams only ever look at the domain, the codomain and the equality of
their morphisms, so any :class:`freediagrams.utils.Composable` will do. Named
boxes are the simplest, they compose into paths:

>>> f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
>>> assert (f >> g).dom == Ob('x') and (f >> g).cod == Ob('z')
>>> assert Id('x') >> f == f == f >> Id('y')

A functor is applied pointwise to the objects and morphisms of a diagram:

>>> from freediagrams.shapes import Span
>>> F = Functor(ar={f: f >> g})
>>> assert F(Span(f, f)) == Span(f >> g, f >> g)
"""

from __future__ import annotations

import logging
from abc import ABC
from functools import reduce
from typing import Callable, Mapping

from freediagrams import messages
from freediagrams.diagram import FreeDiagram
from freediagrams.shapes import FixedFreeDiagram
from freediagrams.utils import (
    AxiomError,
    Composable,
    MappingOrCallable,
    factory_name,
    from_tree,
    tree_or_value,
    value_from_tree,
    assert_isinstance,
)

logger = logging.getLogger(__name__)


class Ob:
    """
    An object of the free category, with a string as :code:`name`.

    Parameters:
        name : The name of the object.
    """
    def __init__(self, name: str = ""):
        assert_isinstance(name, str)
        self.name = name

    def __repr__(self):
        return f"{factory_name(type(self))}({repr(self.name)})"

    def __str__(self):
        return self.name

    def __eq__(self, other):
        return isinstance(other, Ob) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __lt__(self, other):
        return self.name < other.name

    def to_tree(self) -> dict:
        """
        Serialise an object, see :func:`freediagrams.utils.dumps`.

        Example
        -------
        >>> Ob('x').to_tree()
        {'factory': 'cat.Ob', 'name': 'x'}
        """
        return {'factory': factory_name(type(self)), 'name': self.name}

    @classmethod
    def from_tree(cls, tree: dict) -> Ob:
        return cls(tree['name'])


def as_ob(x: Ob | str) -> Ob:
    """ Cast a string to :class:`Ob`, leave objects as they are. """
    return x if isinstance(x, Ob) else Ob(x)


class Box(Composable[Ob]):
    """
    A generating morphism of the free category, i.e. a named arrow from
    :code:`dom` to :code:`cod`.

    Parameters:
        name : The name of the box.
        dom : The domain of the box, a string is cast to :class:`Ob`.
        cod : The codomain of the box, a string is cast to :class:`Ob`.
        data (any) : Extra data in the box, default is :code:`None`.

    Example
    -------
    >>> f = Box('f', 'x', 'y', data=[42])
    >>> assert f.dom == Ob('x') and f.data == [42]
    >>> assert f != Box('f', 'x', 'y')
    """
    def __init__(self, name: str, dom: Ob | str, cod: Ob | str, data=None):
        assert_isinstance(name, str)
        self.name, self.data = name, data
        self.dom, self.cod = as_ob(dom), as_ob(cod)

    def then(self, *others: Box | Path) -> Path:
        """ Composition with other boxes or paths, called with ``>>``. """
        return Path(self.dom, self).then(*others)

    def __eq__(self, other):
        if isinstance(other, Path):
            return other == self
        return isinstance(other, Box)\
            and (self.name, self.dom, self.cod) == (
                other.name, other.dom, other.cod)\
            and bool(self.data == other.data)

    def __hash__(self):
        return hash((self.name, self.dom, self.cod))

    def __repr__(self):
        data = '' if self.data is None else f", data={repr(self.data)}"
        return f"{factory_name(type(self))}({repr(self.name)}, "\
               f"{repr(self.dom)}, {repr(self.cod)}{data})"

    def __str__(self):
        return self.name

    def to_tree(self) -> dict:
        tree = {
            'factory': factory_name(type(self)), 'name': self.name,
            'dom': self.dom.to_tree(), 'cod': self.cod.to_tree()}
        if self.data is not None:
            tree['data'] = tree_or_value(self.data)
        return tree

    @classmethod
    def from_tree(cls, tree: dict) -> Box:
        return cls(
            tree['name'], from_tree(tree['dom']), from_tree(tree['cod']),
            data=value_from_tree(tree.get('data')))


class Path(Composable[Ob]):
    """
    A morphism of the free category, i.e. a path of composable boxes starting
    at the object :code:`dom`. The empty path is the identity, called with
    :code:`Id`.

    Parameters:
        dom : The start of the path, a string is cast to :class:`Ob`.
        boxes : The boxes along the path.

    Raises:
        AxiomError : If consecutive boxes do not compose.

    Example
    -------
    >>> f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    >>> path = Path('x', f, g)
    >>> assert path == f >> g and path.cod == Ob('z') and len(path) == 2
    >>> print(path, Id('x'))
    f >> g Id(x)
    >>> Path('x', g)
    Traceback (most recent call last):
    ...
    freediagrams.utils.AxiomError: Id(x) does not compose with g: x != y.
    """
    def __init__(self, dom: Ob | str, *boxes: Box):
        self.dom, self.boxes = as_ob(dom), boxes
        last, self.cod = f"Id({self.dom})", self.dom
        for box in boxes:
            assert_isinstance(box, Box)
            if box.dom != self.cod:
                raise AxiomError(messages.NOT_COMPOSABLE.format(
                    last, box, self.cod, box.dom))
            last, self.cod = box, box.cod

    def then(self, *others: Box | Path) -> Path:
        """ Composition with other boxes or paths, called with ``>>``. """
        boxes = self.boxes
        for other in others:
            assert_isinstance(other, (Box, Path))
            boxes += (other, ) if isinstance(other, Box) else other.boxes
        return Path(self.dom, *boxes)

    def __iter__(self):
        yield from self.boxes

    def __len__(self):
        return len(self.boxes)

    def __eq__(self, other):
        if isinstance(other, Box):
            return self.boxes == (other, )
        return isinstance(other, Path)\
            and (self.dom, self.boxes) == (other.dom, other.boxes)

    def __hash__(self):
        if len(self) == 1:
            return hash(self.boxes[0])
        return hash((self.dom, self.boxes))

    def __repr__(self):
        return f"{factory_name(type(self))}("\
            + ", ".join(map(repr, (self.dom, ) + self.boxes)) + ")"

    def __str__(self):
        return " >> ".join(map(str, self.boxes)) or f"Id({self.dom})"

    def to_tree(self) -> dict:
        """
        Serialise a path, see :func:`freediagrams.utils.dumps`.

        Example
        -------
        >>> Id('x').to_tree()
        {'factory': 'cat.Path', 'dom': {'factory': 'cat.Ob', 'name': 'x'}, \
'boxes': []}
        """
        return {
            'factory': factory_name(type(self)), 'dom': self.dom.to_tree(),
            'boxes': [box.to_tree() for box in self.boxes]}

    @classmethod
    def from_tree(cls, tree: dict) -> Path:
        return cls(from_tree(tree['dom']), *map(from_tree, tree['boxes']))


Id = Path


class AbstractFunctor(ABC):
    """
    Anything that can decorate a cospan, see
    :class:`freediagrams.decorated.DecoratedCospan`.

    Note
    ----
    No behaviour is required: composing decorated cospans is the business of
    whoever implements the functor.
    """


class AbstractLaxator(ABC):
    """ The laxator of a :class:`LaxMonoidalFunctor`, with no behaviour. """


class Functor(AbstractFunctor):
    """
    A functor given by its image on objects and on morphisms, the identity
    where not given.

    Applied to a :class:`Path`, it composes the images of the boxes. Applied
    to a free diagram, of fixed shape or not, it is applied to every object
    and morphism and gives the composite diagram.

    Parameters:
        ob : Mapping or function on objects.
        ar : Mapping or function on generating morphisms.

    Raises:
        ShapeMismatch : When applied to a :class:`FreeDiagram` whose image is
            not well-typed, e.g. if ``ob`` and ``ar`` disagree.

    Example
    -------
    >>> from freediagrams.finset import Function
    >>> from freediagrams.shapes import ParallelPair
    >>> f, g = Function((0, 1), 2, 3), Function((0, 2), 2, 3)
    >>> merge = Function.merge(3, 1)
    >>> F = Functor(ar=lambda h: h >> merge)
    >>> assert F(ParallelPair(f, g)) == ParallelPair(f, g)
    >>> assert F(2) == 2 and F(f) == f
    """
    def __init__(self,
                 ob: Mapping | Callable | None = None,
                 ar: Mapping | Callable | None = None):
        self.ob = MappingOrCallable(ob if ob is not None else identity)
        self.ar = MappingOrCallable(ar if ar is not None else identity)

    def __eq__(self, other):
        return type(self) is type(other)\
            and (self.ob, self.ar) == (other.ob, other.ar)

    def __hash__(self):
        return hash(repr(self))

    def __repr__(self):
        return factory_name(type(self)) + f"(ob={self.ob}, ar={self.ar})"

    def __call__(self, other):
        if isinstance(other, FixedFreeDiagram):
            logger.debug("Applying %r to %s.", self, other)
            return type(other)(map(self, other), *map(self, other.objects))
        if isinstance(other, FreeDiagram):
            logger.debug("Applying %r to a free diagram.", self)
            return other.map(self, self)
        if isinstance(other, Path):
            if not other.boxes:
                return Id(self(other.dom))
            return reduce(lambda f, g: f >> g, map(self, other.boxes))
        if isinstance(other, Composable):
            return self.ar[other]
        return self.ob[other]


def identity(x):
    return x


class LaxMonoidalFunctor(AbstractFunctor):
    """
    A lax monoidal functor, i.e. a functor :code:`F` with a laxator
    :code:`L`. Both are opaque here.

    Parameters:
        F : The underlying functor.
        L : The laxator.

    Example
    -------
    >>> class Union(AbstractLaxator):
    ...     pass
    >>> F = LaxMonoidalFunctor(Functor(), Union())
    >>> assert isinstance(F, AbstractFunctor)
    """
    def __init__(self, F: AbstractFunctor, L: AbstractLaxator):
        assert_isinstance(F, AbstractFunctor)
        assert_isinstance(L, AbstractLaxator)
        self.F, self.L = F, L

    def __eq__(self, other):
        return isinstance(other, LaxMonoidalFunctor)\
            and (self.F, self.L) == (other.F, other.L)

    def __hash__(self):
        return hash(repr(self))

    def __repr__(self):
        return factory_name(type(self)) + f"({repr(self.F)}, {repr(self.L)})"
