"""
Basic tests for agmnet package
"""

import networkx as nx
import pytest

from agmnet import generate, AffiliationGraph, SocialGraph


def test_import():
    """Test that package can be imported"""
    import agmnet
    assert hasattr(agmnet, 'generate')
    assert hasattr(agmnet, 'AffiliationGraph')
    assert agmnet.__version__ == '0.1.0'


def test_generate_basic(two_groups):
    """Test basic network generation"""
    S = generate(two_groups, verbose=False)

    assert isinstance(S, SocialGraph)
    assert S.number_of_nodes() == 4
    assert S.number_of_links() > 0


def test_respects_zero_weights(zero_weight_groups):
    """Weight of each membership is 0, thus no links are possible"""
    S = generate(zero_weight_groups, verbose=False)

    assert S.number_of_nodes() == 4
    assert S.number_of_links() == 0


def test_network_properties(two_groups):
    """Test that generated network has expected properties"""
    S = generate(two_groups, rng=3, verbose=False)

    assert set(S.nodes()) == {'user 0', 'user 1', 'user 2', 'user 3'}
    assert 'group 1' not in S.graph
    assert 'group 2' not in S.graph
    assert S.graph.is_directed()
    assert all(u != v for u, v in S.links())


def test_accepts_plain_digraph():
    """A networkx.DiGraph can be passed directly"""
    D = nx.DiGraph()
    D.add_edge('a', 'club')
    D.add_edge('b', 'club')
    D.add_edge('b', 'choir', weight=2.0)
    D.add_edge('c', 'choir', weight=2.0)

    S = generate(D, verbose=False)

    assert set(S.nodes()) == {'a', 'b', 'c'}
    assert D['b']['choir']['weight'] == 2.0
    assert D['a']['club']['weight'] == pytest.approx(2 ** -0.6 * 1.3)


def test_verbose_output(two_groups, capsys):
    """Verbose mode prints a banner and a summary"""
    generate(two_groups, verbose=True)
    out = capsys.readouterr().out

    assert "SOCIAL NETWORK GENERATION" in out
    assert "Nodes: 4" in out


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
