""" This module contains utility functions used around graph generation. """

import numbers

import numpy as np
import pandas as pd

from agmnet.core.errors import ConfigurationError
from agmnet.core.graph import AffiliationGraph

DEFAULT_SEED = 42


def resolve_rng(rng=None):
    """
    Turn the ``rng`` argument of generate() into a random stream.

    Parameters
    ----------
    rng : None, int or object with a ``random()`` method
        None uses a numpy Generator seeded with 42, an int is used as the
        seed of a numpy Generator, anything else must already be a stream
        (numpy.random.Generator, random.Random, ...).

    Returns
    -------
    object
        Stream whose ``random()`` returns a float in [0, 1)
    """
    if rng is None:
        return np.random.default_rng(DEFAULT_SEED)
    if isinstance(rng, bool):
        raise ConfigurationError(f"rng must be a seed or a random stream, got {rng!r}")
    if isinstance(rng, numbers.Integral):
        if rng < 0:
            raise ConfigurationError(f"Seed must be non-negative, got {rng}")
        return np.random.default_rng(int(rng))
    if callable(getattr(rng, 'random', None)):
        return rng
    raise ConfigurationError(f"rng must be a seed or a random stream, got {rng!r}")


def read_file(path):
    """
    CSV and XLSX file reader. Returns pandas dataframe.
    """
    path = str(path)
    if path.endswith('.csv'):
        return pd.read_csv(path)
    elif path.endswith('.xlsx'):
        return pd.read_excel(path)
    else:
        raise ValueError("Unsupported file format: {}".format(path))


def load_affiliations(path, member_column='member', community_column='community',
                      weight_column=None):
    """
    Read a membership table (csv or xlsx) into an AffiliationGraph.

    Parameters
    ----------
    path : str
        The filepath of the membership table, one row per membership.
    member_column : string
        Column holding member ids.
    community_column : string
        Column holding community ids.
    weight_column : string, optional
        Column holding membership weights; empty cells are computed later.

    Returns
    -------
    AffiliationGraph
    """
    df = read_file(path)
    return AffiliationGraph.from_dataframe(df, member_column=member_column,
                                           community_column=community_column,
                                           weight_column=weight_column)


def summarize(S):
    """
    Degree statistics of a generated social graph.

    Degrees count links in both directions, since the social graph is
    conceptually undirected.

    Returns
    -------
    dict
        nodes, links, mean_degree, max_degree, isolated
    """
    degrees = np.array([d for _, d in S.graph.degree()], dtype=np.int64)
    if degrees.size == 0:
        return {'nodes': 0, 'links': 0, 'mean_degree': 0.0, 'max_degree': 0, 'isolated': 0}

    return {
        'nodes': S.number_of_nodes(),
        'links': S.number_of_links(),
        'mean_degree': float(np.mean(degrees)),
        'max_degree': int(np.max(degrees)),
        'isolated': int(np.sum(degrees == 0))
    }
