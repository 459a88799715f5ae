# -*- coding: utf-8 -*-

"""
Decorated cospans, for representing open networks.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    DecoratedCospan

A decorated cospan is a cospan together with some decoration on its base,
e.g. a graph on the finite set at the base of a cospan of finite sets, and a
decorator, i.e. the functor that says how decorations compose. Composing
them is left to the decorator.

>>> from freediagrams.cat import Functor
>>> from freediagrams.finset import Function
>>> from freediagrams.shapes import Cospan
>>> inputs, outputs = Function((0, ), 1, 3), Function((1, 2), 2, 3)
>>> network = DecoratedCospan(
...     Cospan(inputs, outputs), Functor(), [(0, 1), (0, 2)])
>>> assert network.base == 3 and network.right == outputs
>>> assert network.undecorate() == Cospan(inputs, outputs)
"""

from __future__ import annotations

from typing import Any

from freediagrams import messages
from freediagrams.cat import AbstractFunctor
from freediagrams.shapes import Multicospan
from freediagrams.utils import ShapeMismatch, assert_isinstance, factory_name


class DecoratedCospan:
    """
    A cospan with a :code:`decorator` and a :code:`decoration`.

    Parameters:
        cospan : A multicospan with two legs.
        decorator : The functor that decorates the cospan.
        decoration : The decoration, of any type.

    Raises:
        TypeError : If the cospan is not a multicospan or the decorator is not
            a :class:`freediagrams.cat.AbstractFunctor`.
        ShapeMismatch : If the cospan does not have two legs.
    """
    def __init__(self, cospan: Multicospan, decorator: AbstractFunctor,
                 decoration: Any):
        assert_isinstance(cospan, Multicospan)
        assert_isinstance(decorator, AbstractFunctor)
        if not cospan.is_binary:
            raise ShapeMismatch(messages.NOT_BINARY.format(
                "cospan", repr(cospan)))
        self.cospan, self.decorator, self.decoration =\
            cospan, decorator, decoration

    def undecorate(self) -> Multicospan:
        """ The underlying cospan. """
        return self.cospan

    @property
    def base(self):
        return self.cospan.base

    @property
    def left(self):
        return self.cospan.left

    @property
    def right(self):
        return self.cospan.right

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, DecoratedCospan)\
            and self.cospan == other.cospan\
            and self.decorator == other.decorator\
            and bool(self.decoration == other.decoration)

    def __repr__(self):
        return factory_name(type(self)) + f"({repr(self.cospan)}, "\
            f"{repr(self.decorator)}, {repr(self.decoration)})"
