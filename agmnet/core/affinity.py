"""
Affinity accumulation and edge sampling for the Affiliation Graph Model.

For a source member ``u`` and another member ``v`` the affinity is

    F(u, v) = sum over shared communities c of w(u, c) * w(v, c)

and the link u - v is created with probability ``1 - exp(-F(u, v))``.
"""
import math
from collections import defaultdict


def accumulate_affinity(A, S, source):
    """
    Compute the affinity of ``source`` to every member it shares a community with.

    Members already linked to ``source`` in the social graph (in either
    direction) are skipped, so a linked pair is never evaluated again. A
    pair left unlinked is evaluated once more when the other member is the
    source.

    Parameters
    ----------
    A : AffiliationGraph
        Affiliation graph with all weights initialized
    S : SocialGraph
        Social graph being built
    source : hashable
        Member id

    Returns
    -------
    dict
        Mapping neighbor -> total affinity, in discovery order
    """
    affinity = defaultdict(float)

    for community, source_weight in A.communities_of(source):
        for other, other_weight in A.members_of(community):
            if other == source:
                continue
            if S.has_link(source, other):
                continue
            affinity[other] += source_weight * other_weight

    return dict(affinity)


def edge_probability(weight):
    """Probability of a link given the accumulated affinity. Exactly 0 for weight 0."""
    return 1.0 - math.exp(-weight)


def sample_edges(S, source, affinities, rng):
    """
    Draw one random value per candidate and add the links that succeed.

    Parameters
    ----------
    S : SocialGraph
        Social graph being built
    source : hashable
        Member id the affinities were computed for
    affinities : dict
        Output of accumulate_affinity
    rng : object
        Random stream exposing ``random()`` in [0, 1)

    Returns
    -------
    int
        Number of links added
    """
    added = 0
    for neighbor, weight in affinities.items():
        probability = edge_probability(weight)
        S.affinity_pairs += 1
        r = rng.random()
        # the stream may return exactly 0.0, which must not link a zero-affinity pair
        if probability > 0 and r <= probability:
            S.add_link(source, neighbor)
            added += 1
    return added
