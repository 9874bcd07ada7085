"""
Graph containers used by the generator.

Both classes keep a plain networkx.DiGraph in ``.graph`` so results can be
handed to any networkx algorithm, and add the small amount of bookkeeping
the AGM generator needs on top of it.

Classes
-------
AffiliationGraph : Bipartite member -> community input graph
SocialGraph : Member-only output graph with generation counters
"""
import networkx as nx
import pandas as pd

from agmnet.core.errors import StructuralAssumptionViolation

MEMBER = 'member'
COMMUNITY = 'community'
ROLE_ATTR = 'role'


class AffiliationGraph:
    """
    Bipartite affiliation graph. Every edge points from a member to a community.

    Parameters
    ----------
    graph : networkx.DiGraph, optional
        Existing graph to wrap. A new empty DiGraph is created if omitted.
    weight_attr : str, optional
        Edge attribute holding the membership weight (default 'weight')

    Raises
    ------
    StructuralAssumptionViolation
        If ``graph`` is undirected, since roles are inferred from direction,
        or a multigraph, since a member belongs to a community at most once.
    """

    def __init__(self, graph=None, weight_attr='weight'):
        if graph is None:
            graph = nx.DiGraph()
        if not graph.is_directed():
            raise StructuralAssumptionViolation(
                "Affiliation graph must be directed (member -> community), "
                f"got {type(graph).__name__}")
        if graph.is_multigraph():
            raise StructuralAssumptionViolation(
                "Affiliation graph cannot hold parallel memberships, "
                f"got {type(graph).__name__}; collapse it to a DiGraph first")
        self.graph = graph
        self.weight_attr = weight_attr

    @classmethod
    def from_edges(cls, edges, weight_attr='weight'):
        """
        Build an affiliation graph from (member, community[, weight]) tuples.
        """
        A = cls(weight_attr=weight_attr)
        for edge in edges:
            if len(edge) == 2:
                A.add_membership(edge[0], edge[1])
            elif len(edge) == 3:
                A.add_membership(edge[0], edge[1], edge[2])
            else:
                raise ValueError(f"Expected (member, community[, weight]), got {edge!r}")
        return A

    @classmethod
    def from_dataframe(cls, df, member_column='member', community_column='community',
                       weight_column=None, weight_attr='weight'):
        """
        Build an affiliation graph from a pandas DataFrame with one row per membership.

        Parameters
        ----------
        df : pandas.DataFrame
            Membership table
        member_column : str, optional
            Column holding member ids (default 'member')
        community_column : str, optional
            Column holding community ids (default 'community')
        weight_column : str, optional
            Column holding membership weights. Missing values (NaN) are left
            unset so they get computed during generation.
        weight_attr : str, optional
            Edge attribute to store weights under (default 'weight')

        Returns
        -------
        AffiliationGraph
        """
        missing = [c for c in (member_column, community_column, weight_column)
                   if c is not None and c not in df.columns]
        if missing:
            raise ValueError(f"Columns not found in membership table: {missing}")

        A = cls(weight_attr=weight_attr)
        # column-wise so each id column keeps its own dtype
        members = df[member_column].tolist()
        communities = df[community_column].tolist()
        if weight_column is None:
            weights = [None] * len(df)
        else:
            weights = [float(w) if pd.notna(w) else None for w in df[weight_column].tolist()]

        for member, community, weight in zip(members, communities, weights):
            A.add_membership(member, community, weight)
        return A

    def add_membership(self, member, community, weight=None):
        """Add a member -> community edge. ``weight=None`` leaves it to be computed."""
        if weight is None:
            self.graph.add_edge(member, community)
        else:
            self.graph.add_edge(member, community, **{self.weight_attr: weight})

    def add_member(self, node):
        """Add a node explicitly tagged as a member (it may stay isolated)."""
        self.graph.add_node(node, **{ROLE_ATTR: MEMBER})

    def add_community(self, node):
        """Add a node explicitly tagged as a community."""
        self.graph.add_node(node, **{ROLE_ATTR: COMMUNITY})

    def nodes(self):
        return list(self.graph.nodes)

    def role_tag(self, node):
        return self.graph.nodes[node].get(ROLE_ATTR)

    def memberships(self):
        """Yield (member, community, weight) for every edge; weight may be None."""
        for member, community, data in self.graph.edges(data=True):
            yield member, community, data.get(self.weight_attr)

    def communities_of(self, member):
        """Yield (community, weight) for each community ``member`` belongs to."""
        for community, data in self.graph.succ[member].items():
            yield community, data.get(self.weight_attr)

    def members_of(self, community):
        """Yield (member, weight) for each member of ``community``."""
        for member, data in self.graph.pred[community].items():
            yield member, data.get(self.weight_attr)

    def community_size(self, community):
        """Number of edges incident on ``community``."""
        return self.graph.degree(community)

    def get_weight(self, member, community):
        return self.graph[member][community].get(self.weight_attr)

    def set_weight(self, member, community, weight):
        self.graph[member][community][self.weight_attr] = weight

    def number_of_nodes(self):
        return self.graph.number_of_nodes()

    def number_of_memberships(self):
        return self.graph.number_of_edges()


class SocialGraph:
    """
    Output graph over member nodes.

    Links are stored as directed records (source -> target) but the graph is
    treated as undirected for duplicate detection: at most one link exists
    per unordered pair.

    Attributes
    ----------
    graph : networkx.DiGraph
        The generated network
    affinity_pairs : int
        Number of (source, candidate) pairs evaluated by the sampler. Each
        evaluation consumes exactly one value from the random stream.
    """

    def __init__(self):
        self.graph = nx.DiGraph()
        self.affinity_pairs = 0

    def add_node(self, node):
        self.graph.add_node(node)

    def has_link(self, a, b):
        """True if a link exists between ``a`` and ``b`` in either direction."""
        adj = self.graph.adj
        return (a in adj and b in adj[a]) or (b in adj and a in adj[b])

    def add_link(self, source, target):
        """
        Add a link source -> target.

        Raises
        ------
        ValueError
            On self-loops, on endpoints that are not nodes of the graph, or if
            the pair is already linked in either direction.
        """
        if source == target:
            raise ValueError(f"Self-loop on {source!r} is not allowed")
        if source not in self.graph or target not in self.graph:
            raise ValueError(f"Both endpoints must be member nodes: {source!r}, {target!r}")
        if self.has_link(source, target):
            raise ValueError(f"Link between {source!r} and {target!r} already exists")
        self.graph.add_edge(source, target)

    def nodes(self):
        return list(self.graph.nodes)

    def links(self):
        return list(self.graph.edges)

    def number_of_nodes(self):
        return self.graph.number_of_nodes()

    def number_of_links(self):
        return self.graph.number_of_edges()
