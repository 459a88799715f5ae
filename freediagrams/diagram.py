# -*- coding: utf-8 -*-

"""
Free diagrams of arbitrary shape, i.e. directed multigraphs with an object
on each vertex and a morphism on each edge.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    FreeDiagram

Vertices and edges are numbered contiguously in insertion order, starting at
:data:`freediagrams.config.BASE_INDEX`. Each edge goes from the domain of its
morphism to its codomain:

>>> from freediagrams.finset import Function
>>> f, g = Function((0, 1), 2, 3), Function((2, 2, 2, 0), 4, 3)
>>> diagram = FreeDiagram([2, 4, 3], [(0, 2, f), (1, 2, g)])
>>> assert diagram.vertices == range(3) and diagram.edges == range(2)
>>> assert diagram.ob(2) == 3 and diagram.hom(1) == g
>>> assert diagram.in_edges(2) == [0, 1]
>>> FreeDiagram([2, 4, 3], [(0, 2, f), (0, 2, g)])
Traceback (most recent call last):
...
freediagrams.utils.ShapeMismatch: Source 0 of edge (0, 2, Function((2, 2, \
2, 0), 4, 3)) has object 2, expected 4.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

import matplotlib.pyplot as plt
from networkx import (
    DiGraph,
    MultiDiGraph,
    draw_networkx,
    draw_networkx_edge_labels,
    spring_layout,
)

from freediagrams import messages
from freediagrams.config import BASE_INDEX, DRAWING_DEFAULT
from freediagrams.utils import (
    Composable,
    IndexOutOfRange,
    MissingAttribute,
    ShapeMismatch,
    factory_name,
    is_index,
    assert_inrange,
    tree_or_value,
    value_from_tree,
)

logger = logging.getLogger(__name__)

Triple = tuple[int, int, Composable]
""" An edge given by its source, its target and its morphism. """


class FreeDiagram:
    """
    A free diagram is a directed multigraph with an object :meth:`ob` on each
    vertex and a morphism :meth:`hom` on each edge, such that each edge goes
    from the domain of its morphism to its codomain.

    Parameters:
        obs : The objects on the vertices.
        homs : The edges as triples ``(source, target, morphism)``.

    Raises:
        IndexOutOfRange : If some triple has a source or target that is not a
            vertex.
        ShapeMismatch : If some triple has a source (target) whose object is
            not the domain (codomain) of its morphism, or if some object or
            morphism is ``None``.

    Note
    ----
    Every triple is checked before anything is inserted, the error reports
    the first one that fails. Unbound vertices and edges can only be added
    one at a time, see :meth:`add_vertex` and :meth:`add_edge`.

    Note
    ----
    The diagram is stored as a :class:`networkx.MultiDiGraph` with integers
    as nodes and edge keys, see :meth:`to_graph`. Diagrams are append-only:
    there is no way to remove a vertex or an edge.

    Example
    -------
    >>> from freediagrams.cat import Box
    >>> f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    >>> diagram = FreeDiagram()
    >>> x, y, z = diagram.add_vertices([f.dom, f.cod, g.cod])
    >>> assert diagram.add_edges([x, y], [y, z], [f, g]) == range(2)
    >>> assert diagram == FreeDiagram(
    ...     [f.dom, f.cod, g.cod], [(0, 1, f), (1, 2, g)])
    >>> print(diagram)
    FreeDiagram(x, y, z; f: 0 -> 1, g: 1 -> 2)
    """
    def __init__(self, obs: Iterable = (), homs: Iterable[Triple] = ()):
        self.graph = MultiDiGraph()
        self._ends: list[tuple[int, int]] = []
        obs, homs = list(obs), [tuple(triple) for triple in homs]
        for src, tgt, hom in homs:
            self._assert_edge(
                src, tgt, hom, lambda v: obs[v - BASE_INDEX], len(obs),
                bound=True)
        for vertex, ob in enumerate(obs, BASE_INDEX):
            if ob is None:
                raise ShapeMismatch(messages.UNBOUND_OB.format(vertex))
        self.add_vertices(obs)
        for src, tgt, hom in homs:
            self._add_edge(src, tgt, hom)
        if homs or obs:
            logger.debug(
                "Built a free diagram with %d vertices and %d edges.",
                self.n_vertices, self.n_edges)

    @property
    def n_vertices(self) -> int:
        """ The number of vertices. """
        return self.graph.number_of_nodes()

    @property
    def n_edges(self) -> int:
        """ The number of edges. """
        return len(self._ends)

    @property
    def vertices(self) -> range:
        """ The range of vertex ids. """
        return range(BASE_INDEX, BASE_INDEX + self.n_vertices)

    @property
    def edges(self) -> range:
        """ The range of edge ids. """
        return range(BASE_INDEX, BASE_INDEX + self.n_edges)

    def has_vertex(self, vertex: int) -> bool:
        """ Whether ``vertex`` is the id of a vertex. """
        return is_index(vertex) and vertex in self.vertices

    def has_edge(self, edge: int) -> bool:
        """ Whether ``edge`` is the id of an edge. """
        return is_index(edge) and edge in self.edges

    def _assert_vertex(self, vertex: int):
        assert_inrange(vertex, self.vertices, "Vertex")

    def _assert_edge_id(self, edge: int):
        assert_inrange(edge, self.edges, "Edge")

    @staticmethod
    def _assert_edge(src, tgt, hom, ob, n_vertices, bound=False):
        """
        Check that an edge has endpoints among ``n_vertices`` and that its
        morphism, if any, goes from the object ``ob(src)`` to ``ob(tgt)``,
        where unbound objects are ``None``.

        If ``bound`` then the morphism and both objects must not be ``None``.
        """
        vertices = range(BASE_INDEX, BASE_INDEX + n_vertices)
        for vertex in (src, tgt):
            assert_inrange(vertex, vertices, "Vertex")
        edge = f"({src}, {tgt}, {hom})"
        src_ob, tgt_ob = ob(src), ob(tgt)
        if bound and any(x is None for x in (hom, src_ob, tgt_ob)):
            raise ShapeMismatch(messages.UNBOUND_EDGE.format(edge))
        if hom is None:
            return
        if src_ob is not None and src_ob != hom.dom:
            raise ShapeMismatch(messages.WRONG_EDGE_DOM.format(
                src, edge, src_ob, hom.dom))
        if tgt_ob is not None and tgt_ob != hom.cod:
            raise ShapeMismatch(messages.WRONG_EDGE_COD.format(
                tgt, edge, tgt_ob, hom.cod))

    def _get_ob(self, vertex: int):
        return self.graph.nodes[vertex].get("ob")

    def _add_edge(self, src: int, tgt: int, hom) -> int:
        edge = BASE_INDEX + self.n_edges
        attributes = {} if hom is None else {"hom": hom}
        self.graph.add_edge(src, tgt, key=edge, **attributes)
        self._ends.append((src, tgt))
        return edge

    def add_vertex(self, ob: Optional[Any] = None) -> int:
        """
        Add a vertex and return its id.

        Parameters:
            ob : The object on the vertex, left unbound if ``None``.
        """
        vertex = BASE_INDEX + self.n_vertices
        attributes = {} if ob is None else {"ob": ob}
        self.graph.add_node(vertex, **attributes)
        return vertex

    def add_vertices(self, obs: Iterable) -> range:
        """
        Add a vertex for each object and return the range of their ids.

        Parameters:
            obs : The objects on the new vertices.
        """
        start = BASE_INDEX + self.n_vertices
        for ob in obs:
            self.add_vertex(ob)
        return range(start, BASE_INDEX + self.n_vertices)

    def add_edge(self, src: int, tgt: int, hom: Optional[Any] = None) -> int:
        """
        Add an edge and return its id.

        Parameters:
            src : The source vertex.
            tgt : The target vertex.
            hom : The morphism on the edge, left unbound if ``None``.

        Raises:
            IndexOutOfRange : If ``src`` or ``tgt`` is not a vertex.
            ShapeMismatch : If the objects on ``src`` and ``tgt`` are bound
                and are not the domain and codomain of ``hom``.
        """
        self._assert_edge(src, tgt, hom, self._get_ob, self.n_vertices)
        return self._add_edge(src, tgt, hom)

    def add_edges(self, srcs: Iterable[int], tgts: Iterable[int],
                  homs: Optional[Iterable] = None) -> range:
        """
        Add an edge for each source, target and morphism, return their ids.

        Parameters:
            srcs : The source vertices.
            tgts : The target vertices.
            homs : The morphisms on the edges, all unbound if ``None``.

        Raises:
            ShapeMismatch : If the three sequences have different lengths,
                or as in :meth:`add_edge`.

        Note
        ----
        Every edge is checked before anything is inserted.

        Example
        -------
        >>> diagram = FreeDiagram()
        >>> diagram.add_vertices(["x", "y"])
        range(0, 2)
        >>> diagram.add_edges([0, 0], [1], [None, None])
        Traceback (most recent call last):
        ...
        freediagrams.utils.ShapeMismatch: Expected sequences of equal \
length, got (2, 1, 2).
        """
        srcs, tgts = list(srcs), list(tgts)
        homs = len(srcs) * [None] if homs is None else list(homs)
        if not len(srcs) == len(tgts) == len(homs):
            raise ShapeMismatch(messages.LENGTHS_DO_NOT_MATCH.format(
                (len(srcs), len(tgts), len(homs))))
        for src, tgt, hom in zip(srcs, tgts, homs):
            self._assert_edge(src, tgt, hom, self._get_ob, self.n_vertices)
        start = BASE_INDEX + self.n_edges
        for src, tgt, hom in zip(srcs, tgts, homs):
            self._add_edge(src, tgt, hom)
        return range(start, BASE_INDEX + self.n_edges)

    def ob(self, vertex: int):
        """
        The object on a vertex.

        Raises:
            IndexOutOfRange : If there is no such vertex.
            MissingAttribute : If the vertex has no object.
        """
        self._assert_vertex(vertex)
        if "ob" not in self.graph.nodes[vertex]:
            raise MissingAttribute(messages.MISSING_OB.format(vertex))
        return self.graph.nodes[vertex]["ob"]

    def hom(self, edge: int):
        """
        The morphism on an edge.

        Raises:
            IndexOutOfRange : If there is no such edge.
            MissingAttribute : If the edge has no morphism.

        Example
        -------
        >>> diagram = FreeDiagram()
        >>> diagram.add_edge(diagram.add_vertex(), diagram.add_vertex())
        0
        >>> diagram.hom(0)
        Traceback (most recent call last):
        ...
        freediagrams.utils.MissingAttribute: Edge 0 has no morphism.
        """
        src, tgt = self._ends[self._index(edge)]
        attributes = self.graph.edges[src, tgt, edge]
        if "hom" not in attributes:
            raise MissingAttribute(messages.MISSING_HOM.format(edge))
        return attributes["hom"]

    def _index(self, edge: int) -> int:
        self._assert_edge_id(edge)
        return edge - BASE_INDEX

    def obs(self) -> list:
        """ The objects on all the vertices, in order. """
        return [self.ob(vertex) for vertex in self.vertices]

    def homs(self) -> list:
        """ The morphisms on all the edges, in order. """
        return [self.hom(edge) for edge in self.edges]

    def src(self, edge: int) -> int:
        """ The source vertex of an edge. """
        return self._ends[self._index(edge)][0]

    def tgt(self, edge: int) -> int:
        """ The target vertex of an edge. """
        return self._ends[self._index(edge)][1]

    def out_edges(self, vertex: int) -> list[int]:
        """ The edges with ``vertex`` as source, in order. """
        self._assert_vertex(vertex)
        return sorted(key for _, _, key in self.graph.out_edges(
            vertex, keys=True))

    def in_edges(self, vertex: int) -> list[int]:
        """ The edges with ``vertex`` as target, in order. """
        self._assert_vertex(vertex)
        return sorted(key for _, _, key in self.graph.in_edges(
            vertex, keys=True))

    @property
    def triples(self) -> list[tuple[int, int, Any]]:
        """ The edges as triples, with ``None`` for unbound morphisms. """
        return [
            (src, tgt, self.graph.edges[src, tgt, edge].get("hom"))
            for edge, (src, tgt) in zip(self.edges, self._ends)]

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, FreeDiagram)\
            and [self._get_ob(v) for v in self.vertices]\
            == [other._get_ob(v) for v in other.vertices]\
            and self.triples == other.triples

    __hash__ = None

    def __repr__(self):
        obs = [self._get_ob(v) for v in self.vertices]
        return factory_name(type(self))\
            + f"(obs={repr(obs)}, homs={repr(self.triples)})"

    def __str__(self):
        obs = ", ".join(str(self._get_ob(v)) for v in self.vertices)
        homs = ", ".join(
            f"{hom}: {src} -> {tgt}" for src, tgt, hom in self.triples)
        return f"{type(self).__name__}({obs}; {homs})"

    @classmethod
    def from_shape(cls, shape) -> FreeDiagram:
        """
        The free diagram of a fixed shape, see
        :meth:`freediagrams.shapes.FixedFreeDiagram.to_free_diagram`.

        Example
        -------
        >>> from freediagrams.cat import Box
        >>> from freediagrams.shapes import Cospan
        >>> f, g = Box('f', 'x', 'z'), Box('g', 'y', 'z')
        >>> print(FreeDiagram.from_shape(Cospan(f, g)))
        FreeDiagram(x, y, z; f: 0 -> 2, g: 1 -> 2)
        """
        from freediagrams.shapes import FixedFreeDiagram
        if not isinstance(shape, FixedFreeDiagram):
            raise TypeError(messages.NOT_A_FREE_DIAGRAM.format(repr(shape)))
        return shape.to_free_diagram()

    def map(self, ob: Callable, hom: Callable) -> FreeDiagram:
        """
        The diagram of the same shape with ``ob`` applied to every object and
        ``hom`` to every morphism. Unbound attributes stay unbound.

        Parameters:
            ob : The function on objects.
            hom : The function on morphisms.

        Raises:
            ShapeMismatch : If the image of some edge does not go from the
                image of its source to the image of its target.

        Example
        -------
        >>> from freediagrams.finset import Function
        >>> f = Function((0, 1), 2, 3)
        >>> diagram = FreeDiagram([2, 3], [(0, 1, f)])
        >>> print(diagram.map(lambda n: n + 1, lambda f: f.tensor(f.id(1))))
        FreeDiagram(3, 4; Function((0, 1, 3), 3, 4): 0 -> 1)
        """
        image = type(self)()
        image.add_vertices(
            None if x is None else ob(x)
            for x in map(self._get_ob, self.vertices))
        srcs, tgts, homs = zip(*self.triples) if self.n_edges else 3 * [()]
        image.add_edges(srcs, tgts, [
            None if f is None else hom(f) for f in homs])
        return image

    def to_graph(self) -> MultiDiGraph:
        """
        The underlying graph, with integers as nodes and edge keys and the
        objects and morphisms as attributes ``ob`` and ``hom``.
        """
        return self.graph.copy()

    @classmethod
    def from_graph(cls, graph: MultiDiGraph) -> FreeDiagram:
        """
        The inverse of :meth:`to_graph`.

        Parameters:
            graph : A multigraph with nodes and edge keys numbered from
                :data:`freediagrams.config.BASE_INDEX`.

        Raises:
            IndexOutOfRange : If nodes or keys are not numbered contiguously.
        """
        diagram = cls()
        nodes = sorted(graph.nodes)
        if nodes != list(range(BASE_INDEX, BASE_INDEX + len(nodes))):
            raise IndexOutOfRange(messages.INDEX_OUT_OF_RANGE.format(
                "Vertex", nodes, range(BASE_INDEX, BASE_INDEX + len(nodes))))
        diagram.add_vertices(graph.nodes[v].get("ob") for v in nodes)
        edges = sorted(graph.edges(keys=True, data=True), key=lambda e: e[2])
        keys = [key for _, _, key, _ in edges]
        if keys != list(range(BASE_INDEX, BASE_INDEX + len(keys))):
            raise IndexOutOfRange(messages.INDEX_OUT_OF_RANGE.format(
                "Edge", keys, range(BASE_INDEX, BASE_INDEX + len(keys))))
        for src, tgt, _, attributes in edges:
            diagram.add_edge(src, tgt, attributes.get("hom"))
        return diagram

    def to_tree(self) -> dict:
        """
        Serialise a free diagram, see :func:`freediagrams.utils.dumps`.

        Example
        -------
        >>> from freediagrams.finset import Function
        >>> diagram = FreeDiagram([1, 2], [(0, 1, Function((1, ), 1, 2))])
        >>> diagram.to_tree()['homs']  # doctest: +NORMALIZE_WHITESPACE
        [[0, 1, {'factory': 'finset.Function',
                 'inside': [1], 'dom': 1, 'cod': 2}]]
        """
        return {
            'factory': factory_name(type(self)),
            'obs': [tree_or_value(self._get_ob(v)) for v in self.vertices],
            'homs': [[src, tgt, tree_or_value(hom)]
                     for src, tgt, hom in self.triples]}

    @classmethod
    def from_tree(cls, tree: dict) -> FreeDiagram:
        """ Decode a serialised free diagram. """
        diagram = cls()
        diagram.add_vertices(map(value_from_tree, tree['obs']))
        for src, tgt, hom in tree['homs']:
            diagram.add_edge(src, tgt, value_from_tree(hom))
        return diagram

    def draw(self, path: Optional[str] = None, seed: Optional[int] = None,
             **params):
        """
        Draw a free diagram using a force-based layout algorithm, with
        objects on the nodes and morphisms on the edges.

        Parameters:
            path : Where to save the drawing, shown if ``None``.
            seed : The random seed of the layout.
            params : Overrides :data:`freediagrams.config.DRAWING_DEFAULT`.

        Note
        ----
        Parallel edges are drawn once, with their morphisms separated by
        commas.
        """
        params = dict(DRAWING_DEFAULT, **params)
        shape = DiGraph()
        shape.add_nodes_from(self.vertices)
        labels = {}
        for src, tgt, hom in self.triples:
            labels.setdefault((src, tgt), []).append(
                "" if hom is None else str(hom))
        shape.add_edges_from(labels)
        pos = spring_layout(shape, seed=seed, k=params["k"])
        fig, ax = plt.subplots(figsize=params["figsize"])
        draw_networkx(
            shape, pos=pos, ax=ax,
            labels={v: "" if self._get_ob(v) is None else str(self._get_ob(v))
                    for v in self.vertices},
            node_size=params["node_size"], node_color=params["node_color"],
            edgecolors=params["edgecolors"], font_size=params["fontsize"],
            arrowsize=params["arrowsize"],
            connectionstyle=params["connectionstyle"].format(
                params["curvature"]))
        draw_networkx_edge_labels(
            shape, pos=pos, ax=ax, font_size=params["fontsize"],
            edge_labels={edge: ", ".join(homs)
                         for edge, homs in labels.items()})
        ax.axis("off")
        if path is not None:
            fig.savefig(path)
            plt.close(fig)
        else:
            plt.show()
