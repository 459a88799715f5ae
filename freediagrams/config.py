# -*- coding: utf-8 -*-

""" freediagrams configuration. """

# First id given to the vertices and edges of a free diagram.
BASE_INDEX = 0

# Default parameters of FreeDiagram.draw.
DRAWING_DEFAULT = {
    "figsize": (6, 4),
    "fontsize": 12,
    "node_size": 600,
    "node_color": "white",
    "edgecolors": "black",
    "arrowsize": 15,
    "connectionstyle": "arc3,rad={}",
    "curvature": .2,
    "k": None,
}
