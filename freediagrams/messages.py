# -*- coding: utf-8 -*-

"""
freediagrams error messages.
"""

TYPE_ERROR = "Expected {}, got {} instead."
NOT_COMPOSABLE = "{} does not compose with {}: {} != {}."
EMPTY_SHAPE = "Expected at least one {}, got none."
DOMS_DO_NOT_MATCH = "Domains of {} do not match: {} vs {}."
CODS_DO_NOT_MATCH = "Codomains of {} do not match: {} vs {}."
NOT_BINARY = "Expected {} with two legs, got {} instead."
INDEX_OUT_OF_RANGE = "{} index {} out of {}."
MISSING_OB = "Vertex {} has no object."
MISSING_HOM = "Edge {} has no morphism."
WRONG_EDGE_DOM = "Source {} of edge {} has object {}, expected {}."
WRONG_EDGE_COD = "Target {} of edge {} has object {}, expected {}."
LENGTHS_DO_NOT_MATCH = "Expected sequences of equal length, got {}."
NOT_A_FREE_DIAGRAM = "Cannot convert {} to a free diagram."
UNBOUND_OB = "Expected an object on vertex {}, got None."
UNBOUND_EDGE = "Expected a morphism and objects at both ends of edge {}."
