"""
Custom Columns and Weights Example
==================================

This example shows how to use agmnet with a membership table that has
different column names and carries its own membership weights.
"""

from agmnet import generate, AffiliationGraph
import pandas as pd

# Membership table with custom column names; empty weights are computed
membership_data = pd.DataFrame({
    'person': ['ann', 'ben', 'cat', 'ben', 'cat', 'dan'],
    'group': ['chess', 'chess', 'chess', 'choir', 'choir', 'choir'],
    'strength': [2.0, None, 0.5, 1.0, None, 0.0]  # 0 switches a membership off
})

A = AffiliationGraph.from_dataframe(
    membership_data,
    member_column='person',       # Instead of default 'member'
    community_column='group',     # Instead of default 'community'
    weight_column='strength'
)

# Generate network with a steeper power law for the missing weights
print("Generating network with custom column names...")
S = generate(A, coefficient=1.0, scale=2.0, rng=7, verbose=True)

print(f"\nGenerated network with {S.number_of_nodes()} nodes and {S.number_of_links()} links")
for u, v in S.links():
    print(f"  {u} - {v}")
