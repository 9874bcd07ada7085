"""
agmnet - Affiliation Graph Model Networks
=========================================

A Python package for generating social networks from affiliation data:
members linked to the communities (mailing lists, groups, clubs) they belong
to. Links between members are sampled with a probability driven by the
strength of the communities they share.

Main Functions
--------------
generate : Generate a social network from an affiliation graph
load_affiliations : Read a membership table into an affiliation graph

Classes
-------
AffiliationGraph : Bipartite member -> community input graph
SocialGraph : Generated member graph
"""

__version__ = "0.1.0"

from agmnet.core.generate import generate
from agmnet.core.graph import AffiliationGraph, SocialGraph
from agmnet.core.utils import load_affiliations
from agmnet.core.errors import (
    AGMError,
    ConfigurationError,
    StructuralAssumptionViolation,
    InvalidWeightError,
    GenerationInterrupted
)

__all__ = [
    'generate',
    'load_affiliations',
    'AffiliationGraph',
    'SocialGraph',
    'AGMError',
    'ConfigurationError',
    'StructuralAssumptionViolation',
    'InvalidWeightError',
    'GenerationInterrupted'
]
