"""
agmnet Core Module
==================

Core functionality for social network generation.
"""

from agmnet.core.generate import generate
from agmnet.core.graph import AffiliationGraph, SocialGraph
from agmnet.core.weights import init_weights, power_law_weight, validate_weight_params
from agmnet.core.roles import node_role, is_community, classify_nodes, project_members
from agmnet.core.affinity import accumulate_affinity, edge_probability, sample_edges
from agmnet.core.utils import resolve_rng, read_file, load_affiliations, summarize

__all__ = [
    'generate',
    'AffiliationGraph',
    'SocialGraph',
    'init_weights',
    'power_law_weight',
    'validate_weight_params',
    'node_role',
    'is_community',
    'classify_nodes',
    'project_members',
    'accumulate_affinity',
    'edge_probability',
    'sample_edges',
    'resolve_rng',
    'read_file',
    'load_affiliations',
    'summarize'
]
