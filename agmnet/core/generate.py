"""
Social network generation from an affiliation graph.

This module turns a bipartite member -> community graph into a social graph
over the members, following the Affiliation Graph Model (AGM): two members
are linked with a probability that grows with the strength of the
communities they share.

Functions
---------
generate : Main function to generate a complete social network

Examples
--------
>>> A = AffiliationGraph.from_edges([('ann', 'chess'), ('bob', 'chess')])
>>> S = generate(A, rng=7, verbose=False)
>>> print(f"Generated network: {S.number_of_nodes()} nodes, {S.number_of_links()} links")
"""
import networkx as nx

from agmnet.core.affinity import accumulate_affinity, sample_edges
from agmnet.core.errors import ConfigurationError, GenerationInterrupted
from agmnet.core.graph import AffiliationGraph, SocialGraph
from agmnet.core.roles import classify_nodes, project_members
from agmnet.core.utils import resolve_rng, summarize
from agmnet.core.weights import (DEFAULT_COEFFICIENT, DEFAULT_SCALE,
                                 init_weights, validate_weight_params)


def _as_affiliation_graph(affiliation_graph):
    if isinstance(affiliation_graph, AffiliationGraph):
        return affiliation_graph
    if isinstance(affiliation_graph, nx.Graph):
        return AffiliationGraph(affiliation_graph)
    raise ConfigurationError(
        "affiliation_graph must be an AffiliationGraph or a networkx.DiGraph, "
        f"got {type(affiliation_graph).__name__}")


def _run_edge_creation(A, S, rng, should_stop, verbose):
    """
    Accumulate affinities and sample links for every member of S, in node order.
    """
    sources = list(S.graph.nodes)
    total = len(sources)

    for idx, source in enumerate(sources):
        if should_stop is not None and should_stop():
            raise GenerationInterrupted(
                f"Generation stopped after {idx} of {total} members")

        if verbose and ((idx + 1) % 500 == 0 or idx == 0 or idx == total - 1):
            print(f"\rProcessing member {idx + 1} of {total}", end="")

        affinities = accumulate_affinity(A, S, source)
        sample_edges(S, source, affinities, rng)

    if verbose and total:
        print()


def generate(affiliation_graph, coefficient=DEFAULT_COEFFICIENT, scale=DEFAULT_SCALE,
             rng=None, weight_fn=None, isolated_as_member=False, should_stop=None,
             verbose=True):
    """
    Generate a social network from an affiliation graph.

    Missing membership weights are filled in first, then every member is
    copied into a new graph, and finally each member is linked to the members
    it shares communities with, at random, with probability
    ``1 - exp(-sum_c w(u, c) * w(v, c))``.

    The affiliation graph's weights are written in place. For a fixed graph
    (including node and edge insertion order), fixed parameters and a fixed
    seed, the output is identical across runs.

    Parameters
    ----------
    affiliation_graph : AffiliationGraph or networkx.DiGraph
        Bipartite graph with edges member -> community. A bare DiGraph is
        wrapped with weights read from the 'weight' edge attribute.
    coefficient : float, optional
        Power law exponent for computed weights (default 0.6)
    scale : float, optional
        Power law scale for computed weights (default 1.3)
    rng : int or random stream, optional
        Seed or object with a ``random()`` method returning floats in [0, 1).
        Defaults to a numpy Generator seeded with 42.
    weight_fn : callable, optional
        ``weight_fn(members_count, coefficient, scale)`` replacing the power
        law for memberships without a weight
    isolated_as_member : bool, optional
        Whether untagged nodes without edges are members (default False, they
        are treated as communities and left out)
    should_stop : callable, optional
        Checked before each member is processed; returning True aborts with
        GenerationInterrupted
    verbose : bool, optional
        Whether to print progress information

    Returns
    -------
    SocialGraph
        Generated network; ``.graph`` is a networkx.DiGraph

    Raises
    ------
    ConfigurationError
        Invalid parameters, raised before the input graph is touched
    StructuralAssumptionViolation
        An edge does not run member -> community, raised before the input
        graph is touched
    InvalidWeightError
        A preset weight is negative, infinite, NaN or not a number
    GenerationInterrupted
        ``should_stop`` returned True. No partial graph is returned.
    """
    validate_weight_params(coefficient, scale)
    stream = resolve_rng(rng)
    if should_stop is not None and not callable(should_stop):
        raise ConfigurationError(f"should_stop must be callable, got {should_stop!r}")
    A = _as_affiliation_graph(affiliation_graph)

    if verbose:
        print("="*60)
        print("SOCIAL NETWORK GENERATION")
        print("="*60)
        print(f"\nStep 1: Classifying {A.number_of_nodes()} affiliation nodes...")

    roles = classify_nodes(A, isolated_as_member=isolated_as_member)

    if verbose:
        print("\nStep 2: Initializing membership weights...")

    init_weights(A, coefficient, scale, weight_fn=weight_fn, verbose=verbose)

    S = SocialGraph()
    n_members = project_members(A, S, roles=roles)

    if verbose:
        print(f"\nStep 3: Added {n_members} members "
              f"({len(roles) - n_members} communities left out)")
        print("\nStep 4: Creating links from shared communities...")

    _run_edge_creation(A, S, stream, should_stop, verbose)

    if verbose:
        stats = summarize(S)
        print(f"\n{'='*60}")
        print("SOCIAL NETWORK GENERATION COMPLETE")
        print(f"{'='*60}")
        print(f"Nodes: {stats['nodes']}")
        print(f"Links: {stats['links']}")
        print(f"Pairs evaluated: {S.affinity_pairs}")
        print(f"Mean degree: {stats['mean_degree']:.2f} (max {stats['max_degree']})")
        print(f"Isolated members: {stats['isolated']}")
        print(f"{'='*60}\n")

    return S
