"""
Node roles in the affiliation graph and projection of members.

By construction every affiliation edge starts at a member and ends at a
community, so a node's role follows from the direction of its edges. An
explicit ``role`` node attribute, when present, takes precedence but must
agree with the edges.

Functions
---------
node_role : Role of a single node
is_community : Convenience predicate on node_role
classify_nodes : Roles of all nodes, validating the whole graph up front
project_members : Copy member nodes into a social graph
"""
from agmnet.core.errors import StructuralAssumptionViolation
from agmnet.core.graph import COMMUNITY, MEMBER


def node_role(A, node, isolated_as_member=False):
    """
    Determine whether ``node`` is a member or a community.

    All incident edges are looked at, not only the first one: a node with
    outgoing edges only is a member, a node with incoming edges only is a
    community, and a node with both breaks the member -> community rule.

    Parameters
    ----------
    A : AffiliationGraph
        Affiliation graph
    node : hashable
        Node id
    isolated_as_member : bool, optional
        Role of untagged nodes without edges. False (default) treats them as
        communities, so they are left out of the social graph.

    Returns
    -------
    str
        'member' or 'community'

    Raises
    ------
    StructuralAssumptionViolation
        If the node has edges in both directions, or its role tag contradicts
        its edges or is not a known role.
    """
    out_degree = A.graph.out_degree(node)
    in_degree = A.graph.in_degree(node)

    if out_degree and in_degree:
        raise StructuralAssumptionViolation(
            f"Node {node!r} has {out_degree} outgoing and {in_degree} incoming "
            "edges; affiliation edges must run member -> community")

    tag = A.role_tag(node)
    if tag is not None:
        if tag not in (MEMBER, COMMUNITY):
            raise StructuralAssumptionViolation(f"Node {node!r} has unknown role {tag!r}")
        if tag == MEMBER and in_degree:
            raise StructuralAssumptionViolation(
                f"Node {node!r} is tagged as member but has incoming edges")
        if tag == COMMUNITY and out_degree:
            raise StructuralAssumptionViolation(
                f"Node {node!r} is tagged as community but has outgoing edges")
        return tag

    if out_degree:
        return MEMBER
    if in_degree:
        return COMMUNITY
    return MEMBER if isolated_as_member else COMMUNITY


def is_community(A, node, isolated_as_member=False):
    return node_role(A, node, isolated_as_member=isolated_as_member) == COMMUNITY


def classify_nodes(A, isolated_as_member=False):
    """
    Classify every node of the affiliation graph.

    Used as an eager validation pass: the first structural problem raises
    before any weight or output node is written.

    Returns
    -------
    dict
        Mapping node -> role, in the affiliation graph's node order
    """
    return {node: node_role(A, node, isolated_as_member=isolated_as_member)
            for node in A.graph.nodes}


def project_members(A, S, roles=None, isolated_as_member=False):
    """
    Add every member of the affiliation graph to the social graph.

    Parameters
    ----------
    A : AffiliationGraph
        Affiliation graph
    S : SocialGraph
        Output graph
    roles : dict, optional
        Precomputed result of classify_nodes. Computed here if omitted.
    isolated_as_member : bool, optional
        Passed to classify_nodes when ``roles`` is omitted

    Returns
    -------
    int
        Number of member nodes added
    """
    if roles is None:
        roles = classify_nodes(A, isolated_as_member=isolated_as_member)

    added = 0
    for node in A.graph.nodes:
        if roles[node] != MEMBER:
            continue
        S.add_node(node)
        added += 1
    return added
