# -*- coding: utf-8 -*-

""" freediagrams utility functions. """

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
)

from freediagrams import messages

KT = TypeVar('KT')
VT = TypeVar('VT')


class AxiomError(Exception):
    """ The gods of category theory are not happy. """


class ShapeMismatch(AxiomError):
    """
    A diagram does not have the shape it claims to have, e.g. the legs of a
    span with different domains or an edge whose morphism does not go from
    the object at its source to the object at its target.
    """


class IndexOutOfRange(IndexError):
    """ Positional access beyond the valid range of indices. """


class MissingAttribute(AttributeError):
    """ A vertex or an edge exists but has no object or morphism bound. """


class MappingOrCallable(Mapping[KT, VT]):
    """
    A mapping given either by a Python dictionary or by a function.

    Example
    -------
    >>> f = MappingOrCallable(lambda x: x + 1)
    >>> g = MappingOrCallable({0: 1})
    >>> assert f[0] == g[0] == 1
    >>> assert len(g) == 1 and list(g) == [0]
    """
    def __init__(self, mapping: Mapping[KT, VT] | Callable[[KT], VT]):
        while isinstance(mapping, MappingOrCallable):
            mapping = mapping.mapping
        self.mapping = mapping

    def __bool__(self) -> bool:
        return bool(self.mapping)

    def __len__(self) -> int:
        return len(self.mapping)

    def __iter__(self) -> Iterable[KT]:
        yield from self.mapping

    def __getitem__(self, item: KT) -> VT:
        return self.mapping[item] if hasattr(self.mapping, "__getitem__")\
            else self.mapping(item)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, MappingOrCallable):
            return self.mapping == other.mapping
        return self.mapping == other

    def __repr__(self):
        return repr(self.mapping)


def factory_name(cls: type) -> str:
    """
    Returns a string describing a freediagrams class.

    Example
    -------
    >>> from freediagrams.shapes import Multispan
    >>> assert factory_name(Multispan) == "shapes.Multispan"
    >>> assert factory_name(int) == "int"
    """
    module = cls.__module__.removeprefix('freediagrams.')
    return f"{module}.{cls.__name__}".removeprefix('builtins.')


def from_tree(tree: dict):
    """
    Decode a serialised freediagrams object by looking up its factory.

    Parameters:
        tree : The serialisation of a freediagrams object.

    Example
    -------
    >>> from freediagrams.cat import Ob
    >>> assert from_tree({'factory': 'cat.Ob', 'name': 'x'}) == Ob('x')
    """
    *modules, factory = tree['factory'].removeprefix('freediagrams.')\
        .split('.')
    import freediagrams
    module = freediagrams
    for attr in modules:
        module = getattr(module, attr)
    return getattr(module, factory).from_tree(tree)


def dumps(obj, **kwargs) -> str:
    """
    Serialise a freediagrams object as JSON.

    Parameters:
        obj : The object to serialise.
        kwargs : Passed to ``json.dumps``.

    Example
    -------
    >>> from freediagrams.cat import Box
    >>> from freediagrams.shapes import Span
    >>> f, g = Box('f', 'x', 'y'), Box('g', 'x', 'z')
    >>> print(dumps(Span(f, g).apex))
    {"factory": "cat.Ob", "name": "x"}
    """
    return json.dumps(obj.to_tree(), **kwargs)


def loads(raw: str):
    """
    Loads a serialised freediagrams object.

    Example
    -------
    >>> from freediagrams.cat import Ob
    >>> raw = '{"factory": "cat.Ob", "name": "x"}'
    >>> assert loads(raw) == Ob('x') and dumps(loads(raw)) == raw
    """
    obj = json.loads(raw)
    if isinstance(obj, list):
        return [from_tree(o) for o in obj]
    return from_tree(obj)


def tree_or_value(value):
    """ Serialise ``value`` if it knows how, else leave it as it is. """
    return value.to_tree() if hasattr(value, "to_tree") else value


def value_from_tree(tree):
    """ The inverse of :func:`tree_or_value`. """
    return from_tree(tree) if isinstance(tree, dict) and 'factory' in tree\
        else tree


def assert_isinstance(object_, cls: type | tuple[type, ...]):
    """ Raise ``TypeError`` if ``object`` is not instance of ``cls``. """
    classes = cls if isinstance(cls, tuple) else (cls, )
    cls_name = ' | '.join(map(factory_name, classes))
    if not any(isinstance(object_, cls) for cls in classes):
        raise TypeError(messages.TYPE_ERROR.format(
            cls_name, factory_name(type(object_))))


def assert_nonempty(items: Sequence, name: str):
    """ Raise :class:`ShapeMismatch` if there are no ``items``. """
    if not items:
        raise ShapeMismatch(messages.EMPTY_SHAPE.format(name))


def assert_allequal(
        values: Sequence, items: Sequence, message: str, name: str):
    """
    Raise :class:`ShapeMismatch` if ``values`` are not all equal, reporting
    the first item that disagrees with the first one.

    Parameters:
        values : The values that should all be equal, e.g. domains of legs.
        items : The items they were computed from, e.g. the legs.
        message : The message template, e.g. ``messages.DOMS_DO_NOT_MATCH``.
        name : The name of the shape, e.g. ``"span"``.

    Example
    -------
    >>> assert_allequal([1, 1], ['f', 'g'], "{} {} {}", "legs")
    >>> assert_allequal([1, 2], ['f', 'g'], "{}: {} vs {}", "legs")
    Traceback (most recent call last):
    ...
    freediagrams.utils.ShapeMismatch: legs: f vs g
    """
    for value, item in zip(values[1:], items[1:]):
        if value != values[0]:
            raise ShapeMismatch(message.format(name, items[0], item))


def is_index(value) -> bool:
    """ Whether ``value`` is an integer, booleans excluded. """
    return isinstance(value, int) and not isinstance(value, bool)


def assert_inrange(index: int, indices: range, name: str):
    """
    Raise :class:`IndexOutOfRange` unless ``index`` is an integer in
    ``indices``.

    Example
    -------
    >>> assert_inrange(-1, range(-2, 2), "Leg")
    >>> assert_inrange(True, range(2), "Vertex")
    Traceback (most recent call last):
    ...
    freediagrams.utils.IndexOutOfRange: Vertex index True out of \
range(0, 2).
    """
    if not is_index(index) or index not in indices:
        raise IndexOutOfRange(
            messages.INDEX_OUT_OF_RANGE.format(name, index, indices))


T = TypeVar('T')


class Composable(ABC, Generic[T]):
    """
    Abstract class for morphisms, i.e. anything with a domain :code:`dom` and
    a codomain :code:`cod` that composes with some method :code:`then`.

    This is all the fixed shapes and free diagrams need to know about the
    ambient category, together with equality of objects and morphisms.

    Example
    -------
    >>> from freediagrams.finset import Function
    >>> f, g = Function((0, 2), 2, 3), Function((1, 1, 0), 3, 2)
    >>> assert f >> g == g << f == Function((1, 0), 2, 2)
    >>> assert f.is_composable(g) and not f.is_parallel(g)
    """
    dom: T
    cod: T

    @abstractmethod
    def then(self, other: Optional[Composable[T]], *others: Composable[T]
             ) -> Composable[T]:
        """
        Sequential composition, to be instantiated.

        Parameters:
            other : The other composable object to compose sequentially.
        """

    def is_composable(self, other: Composable) -> bool:
        """
        Whether two morphisms are composable, i.e. the codomain of the first
        is the domain of the second.

        Parameters:
            other : The other composable object.
        """
        return self.cod == other.dom

    def is_parallel(self, other: Composable) -> bool:
        """
        Whether two morphisms are parallel, i.e. they have the same domain and
        codomain.

        Parameters:
            other : The other composable object.
        """
        return (self.dom, self.cod) == (other.dom, other.cod)

    __rshift__ = lambda self, other: self.then(other)
    __lshift__ = lambda self, other: other.then(self)


def assert_iscomposable(left: Composable, right: Composable):
    """
    Raise :class:`AxiomError` if two objects are not composable,
    i.e. the domain of ``right`` is not the codomain of ``left``.
    """
    if not left.is_composable(right):
        raise AxiomError(messages.NOT_COMPOSABLE.format(
            left, right, left.cod, right.dom))
