# -*- coding: utf-8 -*-

from pytest import raises

from freediagrams.cat import *
from freediagrams.diagram import FreeDiagram
from freediagrams.finset import Function
from freediagrams.shapes import Cospan, Multispan, ParallelPair, Span
from freediagrams.utils import AxiomError, ShapeMismatch, dumps, loads


def test_main():
    x, y, z = Ob('x'), Ob('y'), Ob('z')
    f, g, h = Box('f', x, y), Box('g', y, z), Box('h', z, x)
    assert Id(x) >> f == f == f >> Id(y)
    assert (f >> g).dom == f.dom and (f >> g).cod == g.cod
    assert f >> g >> h == f >> (g >> h) == Path(x, f, g, h)
    F = Functor(ob={x: y, y: z, z: x}, ar={f: g, g: h})
    assert F(Id(x)) == Id(F(x))
    assert F(f >> g) == F(f) >> F(g)


def test_Ob():
    assert Ob('x') == Ob('x') and Ob('x') != Ob('y') and Ob('x') != 'x'
    assert repr(Ob('x')) == "cat.Ob('x')" and str(Ob('x')) == 'x'
    assert {Ob('x'): 42}[Ob('x')] == 42
    assert sorted([Ob('y'), Ob('x')]) == [Ob('x'), Ob('y')]
    with raises(TypeError):
        Ob(42)


def test_Box():
    f = Box('f', 'x', 'y', data=[42])
    assert f != Box('f', 'x', 'y') and f == Box('f', 'x', 'y', data=[42])
    assert repr(f) == "cat.Box('f', cat.Ob('x'), cat.Ob('y'), data=[42])"
    assert {Box('f', 'x', 'y'): 42}[Box('f', 'x', 'y')] == 42
    assert f.is_parallel(Box('g', 'x', 'y'))
    with raises(TypeError):
        Box(42, 'x', 'y')


def test_Path_init():
    f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    assert Path('x').cod == Ob('x') and not Path('x')
    assert Path('x', f, g).cod == Ob('z') and list(Path('x', f, g)) == [f, g]
    with raises(TypeError):
        Path('x', Ob('x'))
    with raises(AxiomError):
        Path('x', f, f)


def test_Path_then():
    f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    assert f.then(g) == f >> g == g << f == Path('x', f).then(Path('y', g))
    assert len(f >> g) == 2 and f.then() == f
    assert {f: 42}[Path('x', f)] == 42
    with raises(AxiomError):
        g >> f
    with raises(TypeError):
        f >> Ob('y')


def test_Path_repr():
    f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    assert repr(Id('x')) == "cat.Path(cat.Ob('x'))"
    assert repr(f >> g)\
        == "cat.Path(cat.Ob('x'), cat.Box('f', cat.Ob('x'), cat.Ob('y')), "\
           "cat.Box('g', cat.Ob('y'), cat.Ob('z')))"
    assert str(f >> g) == "f >> g" and str(Id('x')) == "Id(x)"


def test_to_tree():
    f, g = Box('f', 'x', 'y', data=42), Box('g', 'y', 'z')
    assert loads(dumps(f)) == f and loads(dumps(f)).data == 42
    assert loads(dumps(f >> g)) == f >> g
    assert loads(dumps(Id('x'))) == Id('x')
    span = Span(f >> g, Id('x'))
    assert loads(dumps(span)) == span


def test_Functor_paths():
    x, y = Ob('x'), Ob('y')
    f, g = Box('f', x, y), Box('g', y, x)
    F = Functor({x: y, y: x}, {f: g, g: f})
    assert F(f).dom == y and F(F(x)) == x
    assert F(f >> g) == g >> f and F(Id(x)) == Id(y)
    assert Functor()(f >> g) == f >> g
    assert F == Functor({x: y, y: x}, {f: g, g: f}) != Functor()
    with raises(KeyError):
        F(Box('h', x, x))


def test_Functor_fixed_shapes():
    f, g = Function((0, 1), 2, 3), Function((0, 2), 2, 3)
    double = Functor(lambda n: 2 * n, lambda h: h.tensor(h))
    assert double(Span(f, g)) == Span(f.tensor(f), g.tensor(g))
    assert double(Cospan(f, g)).base == 6
    image = double(ParallelPair(f, g))
    assert (image.dom, image.cod, len(image)) == (4, 6, 2)
    assert type(double(Multispan([f, g, f]))) is Multispan


def test_Functor_free_diagram():
    f, g = Function((0, 1), 2, 3), Function((0, 0, 1), 3, 4)
    diagram = FreeDiagram([2, 3, 4], [(0, 1, f), (1, 2, g)])
    double = Functor(lambda n: 2 * n, lambda h: h.tensor(h))
    assert double(diagram) == FreeDiagram(
        [4, 6, 8], [(0, 1, f.tensor(f)), (1, 2, g.tensor(g))])
    assert Functor()(diagram) == diagram and Functor()(diagram) is not diagram
    with raises(ShapeMismatch):
        Functor(ob=lambda n: n + 1)(diagram)


def test_Functor_unbound():
    f = Function((0, 1), 2, 3)
    diagram = FreeDiagram()
    x, y = diagram.add_vertex(), diagram.add_vertex(3)
    diagram.add_edges([x, x], [y, y], [f, None])
    image = Functor(lambda n: n + 1, lambda h: h.tensor(h.id(1)))(diagram)
    assert image.triples == [(0, 1, f.tensor(f.id(1))), (0, 1, None)]
    assert image.to_graph().nodes[0] == {} and image.ob(1) == 4


def test_LaxMonoidalFunctor():
    class Laxator(AbstractLaxator):
        pass

    F, L = Functor(), Laxator()
    lax = LaxMonoidalFunctor(F, L)
    assert (lax.F, lax.L) == (F, L) and lax == LaxMonoidalFunctor(F, L)
    assert isinstance(lax, AbstractFunctor)
    with raises(TypeError):
        LaxMonoidalFunctor(L, L)
    with raises(TypeError):
        LaxMonoidalFunctor(F, F)
