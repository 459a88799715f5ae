# -*- coding: utf-8 -*-

from pytest import raises

from freediagrams.cat import Box, Ob
from freediagrams.finset import Function
from freediagrams.shapes import *
from freediagrams.utils import IndexOutOfRange, ShapeMismatch, dumps, loads

A, B, C = 2, 3, 4
f, g = Function((0, 1), A, B), Function((3, 3), A, C)
h = Function((0, 2), A, B)


def test_Multispan():
    span = Multispan([f, g, f])
    assert span.apex == A and span.legs == (f, g, f) and len(span) == 3
    assert list(span) == list(span) == [f, g, f]


def test_Multispan_mismatch():
    with raises(ShapeMismatch) as err:
        Multispan([f, Function.id(B)])
    assert str(f) in str(err.value)
    with raises(ShapeMismatch):
        Multispan([])


def test_Multispan_trusted():
    x = Ob('x')
    span = Multispan([Box('f', x, 'y')], apex='anything')
    assert span.apex == 'anything'
    with raises(ShapeMismatch):
        Multispan([], apex=x)


def test_Span():
    span = Span(f, g)
    assert span.left == f and span.right == g and span.apex == A
    assert span == Multispan([f, g]) and span.is_binary
    assert str(span) == "Span(Function((0, 1), 2, 3), Function((3, 3), 2, 4))"


def test_Span_mismatch():
    with raises(ShapeMismatch):
        Span(f, Function.id(B))


def test_Span_left_right():
    with raises(ShapeMismatch):
        Multispan([f, g, f]).left
    with raises(ShapeMismatch):
        Multispan([f]).right


def test_Multispan_eq():
    assert Span(f, g) != Span(g, f)
    assert Span(f, g) != Multispan([f, g, g])
    assert Multispan([f, g]) != Multispan([f, g], apex=B)
    assert Span(f, f) != ParallelPair(f, f)
    assert {Span(f, g): 42}[Multispan([f, g])] == 42


def test_Multicospan():
    k = Function((1, 0, 2), B, B)
    cospan = Multicospan([f, k, h])
    assert cospan.base == B and cospan.legs == (f, k, h)
    assert list(cospan) == [f, k, h]
    with raises(ShapeMismatch):
        Multicospan([f, g])
    with raises(ShapeMismatch):
        Multicospan(())


def test_Cospan():
    k = Function((1, 0, 2), B, B)
    cospan = Cospan(f, k)
    assert (cospan.base, cospan.left, cospan.right) == (B, f, k)
    with raises(ShapeMismatch):
        Cospan(f, g)
    with raises(ShapeMismatch):
        Multicospan([f]).left


def test_ParallelMorphisms():
    para = ParallelMorphisms([f, h, f])
    assert (para.dom, para.cod, para.hom) == (A, B, (f, h, f))
    assert (para.first_index, para.last_index) == (0, 2)
    assert para[0] == f and para[1] == h and para[-1] == f


def test_ParallelMorphisms_mismatch():
    with raises(ShapeMismatch) as err:
        ParallelMorphisms([f, Function((0, 1, 2), B, B)])
    assert "Domains" in str(err.value)
    with raises(ShapeMismatch) as err:
        ParallelMorphisms([f, g])
    assert "Codomains" in str(err.value)
    with raises(ShapeMismatch):
        ParallelMorphisms([])


def test_ParallelMorphisms_trusted():
    para = ParallelMorphisms([f, g], dom=A, cod='anything')
    assert para.cod == 'anything'
    with raises(ShapeMismatch):
        ParallelMorphisms([f, g], dom=A)


def test_ParallelMorphisms_getitem():
    para = ParallelMorphisms([f, h])
    with raises(IndexOutOfRange):
        para[2]
    with raises(IndexOutOfRange):
        para[-3]
    with raises(IndexError):
        para[42]
    with raises(TypeError):
        para["f"]
    with raises(TypeError):
        para[True]
    with raises(IndexOutOfRange) as err:
        para[2]
    assert str(err.value)\
        == "Parallel morphisms index 2 out of range(-2, 2)."


def test_ParallelPair():
    pair = ParallelPair(f, h)
    assert pair == ParallelMorphisms([f, h]) and pair.hom == (f, h)
    assert str(pair).startswith("ParallelPair(")
    with raises(ShapeMismatch) as err:
        ParallelPair(f, Function((0, 1, 2), B, B))
    assert "Domains of parallel pair" in str(err.value)
    with raises(ShapeMismatch) as err:
        ParallelPair(f, g)
    assert "Codomains of parallel pair" in str(err.value)


def test_Span_to_free_diagram():
    diagram = Span(f, g).to_free_diagram()
    assert (diagram.n_vertices, diagram.n_edges) == (3, 2)
    assert diagram.obs() == [A, B, C] and diagram.homs() == [f, g]
    assert diagram.out_edges(0) == [0, 1]
    assert [(diagram.src(e), diagram.tgt(e)) for e in diagram.edges]\
        == [(0, 1), (0, 2)]


def test_Multispan_to_free_diagram():
    diagram = Multispan([f, g, h]).to_free_diagram()
    assert diagram.obs() == [A, B, C, B]
    assert [diagram.tgt(e) for e in diagram.edges] == [1, 2, 3]
    assert all(diagram.src(e) == 0 for e in diagram.edges)


def test_Cospan_to_free_diagram():
    k = Function((1, 0, 2), B, B)
    diagram = Cospan(f, k).to_free_diagram()
    assert (diagram.n_vertices, diagram.n_edges) == (3, 2)
    assert diagram.obs() == [A, B, B] and diagram.homs() == [f, k]
    assert diagram.in_edges(2) == [0, 1]
    assert [(diagram.src(e), diagram.tgt(e)) for e in diagram.edges]\
        == [(0, 2), (1, 2)]


def test_ParallelPair_to_free_diagram():
    diagram = ParallelPair(f, h).to_free_diagram()
    assert list(diagram.vertices) == list(diagram.edges) == [0, 1]
    assert (diagram.ob(0), diagram.ob(1)) == (A, B)
    assert (diagram.hom(0), diagram.hom(1)) == (f, h)
    for edge in diagram.edges:
        assert (diagram.src(edge), diagram.tgt(edge)) == (0, 1)


def test_endomorphisms_to_free_diagram():
    k = Function((1, 0, 2), B, B)
    diagram = ParallelMorphisms([k, k, Function.id(B)]).to_free_diagram()
    assert diagram.obs() == [B, B] and diagram.n_edges == 3


def test_to_free_diagram_idempotent():
    for shape in [Span(f, g), Cospan(f, h), ParallelPair(f, h)]:
        assert shape.to_free_diagram() == shape.to_free_diagram()


def test_to_free_diagram_trusted_mismatch():
    with raises(ShapeMismatch):
        Multispan([f, g], apex=B).to_free_diagram()


def test_FixedFreeDiagram_repr():
    x, y, z = map(Ob, "xyz")
    k, l = Box('k', x, y), Box('l', x, z)
    assert repr(Span(k, l))\
        == "shapes.Multispan((cat.Box('k', cat.Ob('x'), cat.Ob('y')), "\
           "cat.Box('l', cat.Ob('x'), cat.Ob('z'))), apex=cat.Ob('x'))"
    assert str(Multispan([k, l, k])) == "Multispan(k, l, k)"


def test_FixedFreeDiagram_to_tree():
    x, y, z = map(Ob, "xyz")
    k, l = Box('k', x, z), Box('l', y, z)
    for shape in [Span(f, g), Cospan(k, l), ParallelMorphisms([f, h, f])]:
        assert loads(dumps(shape)) == shape
