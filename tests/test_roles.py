"""
Tests for node classification and member projection
"""

import networkx as nx
import pytest

from agmnet import AffiliationGraph, SocialGraph, StructuralAssumptionViolation
from agmnet.core.roles import classify_nodes, is_community, node_role, project_members


def test_roles_from_direction(two_groups):
    """Edge sources are members, edge targets are communities"""
    roles = classify_nodes(two_groups)

    assert roles == {
        'user 0': 'member',
        'group 1': 'community',
        'user 1': 'member',
        'user 2': 'member',
        'group 2': 'community',
        'user 3': 'member',
    }
    assert is_community(two_groups, 'group 2')
    assert not is_community(two_groups, 'user 3')


def test_isolated_node_defaults_to_community(two_groups):
    """Untagged nodes without edges are left out by default"""
    two_groups.graph.add_node('loner')

    assert node_role(two_groups, 'loner') == 'community'
    assert node_role(two_groups, 'loner', isolated_as_member=True) == 'member'


def test_role_tag_wins_for_isolated_node():
    A = AffiliationGraph()
    A.add_member('loner')
    A.add_community('empty list')

    assert node_role(A, 'loner') == 'member'
    assert node_role(A, 'empty list', isolated_as_member=True) == 'community'


def test_mixed_direction_rejected():
    """A node that is both source and target breaks the bipartite layout"""
    A = AffiliationGraph()
    A.add_membership('a', 'b')
    A.add_membership('b', 'c')

    with pytest.raises(StructuralAssumptionViolation):
        classify_nodes(A)


def test_role_tag_contradiction_rejected():
    A = AffiliationGraph()
    A.add_membership('a', 'x')
    A.graph.nodes['x']['role'] = 'member'

    with pytest.raises(StructuralAssumptionViolation):
        node_role(A, 'x')


def test_unknown_role_tag_rejected():
    A = AffiliationGraph()
    A.graph.add_node('x', role='moderator')

    with pytest.raises(StructuralAssumptionViolation):
        node_role(A, 'x')


def test_undirected_graph_rejected():
    with pytest.raises(StructuralAssumptionViolation):
        AffiliationGraph(nx.Graph())


def test_project_members(two_groups):
    """Only members are copied, in affiliation graph order, without links"""
    S = SocialGraph()
    added = project_members(two_groups, S)

    assert added == 4
    assert S.nodes() == ['user 0', 'user 1', 'user 2', 'user 3']
    assert S.number_of_links() == 0


def test_project_tagged_isolated_member(two_groups):
    two_groups.add_member('newcomer')
    S = SocialGraph()

    project_members(two_groups, S)

    assert 'newcomer' in S.graph


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
