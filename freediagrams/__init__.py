# -*- coding: utf-8 -*-

"""
freediagrams: free diagrams in a category, of fixed or arbitrary shape.
"""

__version__ = '0.1.0'

from freediagrams import (
    messages,
    config,
    utils,
    cat,
    finset,
    diagram,
    shapes,
    decorated,
)
