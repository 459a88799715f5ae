# -*- coding: utf-8 -*-

from pytest import raises

from freediagrams.cat import (
    AbstractFunctor, AbstractLaxator, Box, Functor, LaxMonoidalFunctor)
from freediagrams.decorated import *
from freediagrams.finset import Function
from freediagrams.shapes import Cospan, Multicospan, Span
from freediagrams.utils import ShapeMismatch


class Union(AbstractLaxator):
    """ Disjoint union of edge lists, as for open graphs. """


f, g = Function((0, ), 1, 3), Function((1, 2), 2, 3)
cospan = Cospan(f, g)
decorator = LaxMonoidalFunctor(Functor(), Union())


def test_DecoratedCospan():
    network = DecoratedCospan(cospan, decorator, [(0, 1), (1, 2)])
    assert network.undecorate() == cospan
    assert network.decorator == decorator
    assert network.decoration == [(0, 1), (1, 2)]
    assert (network.base, network.left, network.right) == (3, f, g)


def test_DecoratedCospan_eq():
    network = DecoratedCospan(cospan, decorator, [(0, 1)])
    assert network == DecoratedCospan(cospan, decorator, [(0, 1)])
    assert network != DecoratedCospan(cospan, decorator, [(1, 0)])
    assert network != DecoratedCospan(Cospan(g, g), decorator, [(0, 1)])
    assert network != cospan


def test_DecoratedCospan_init():
    with raises(TypeError):
        DecoratedCospan(Span(f, f), decorator, None)
    with raises(TypeError):
        DecoratedCospan(cospan, Union(), None)
    with raises(ShapeMismatch):
        DecoratedCospan(Multicospan([f, g, g]), decorator, None)


def test_DecoratedCospan_custom_decorator():
    class Graphs(AbstractFunctor):
        pass

    x, y = Box('x', 'a', 'c'), Box('y', 'b', 'c')
    network = DecoratedCospan(Cospan(x, y), Graphs(), "a -- c -- b")
    assert network.base == x.cod and network.decoration == "a -- c -- b"


def test_DecoratedCospan_repr():
    network = DecoratedCospan(cospan, decorator, 42)
    assert repr(network).startswith("decorated.DecoratedCospan(")
    assert repr(network).endswith(", 42)")
