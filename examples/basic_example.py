"""
Basic Example: Generating a Social Network with agmnet
======================================================

This example demonstrates how to generate a social network from a small
set of mailing list memberships.
"""

from agmnet import generate, load_affiliations
import pandas as pd

# Create sample membership data: who subscribes to which list
membership_data = pd.DataFrame({
    'member': ['alice', 'bob', 'carol', 'bob', 'carol', 'dave', 'erin', 'alice', 'erin', 'frank'],
    'community': ['dev', 'dev', 'dev', 'users', 'users', 'users', 'users', 'announce', 'announce', 'announce']
})

# Save to CSV file
membership_data.to_csv('memberships.csv', index=False)

# Build the affiliation graph and generate the network
print("Generating network...")
A = load_affiliations('memberships.csv')
S = generate(A, coefficient=0.6, scale=1.3, rng=42, verbose=True)

# Print network statistics
print(f"\nNetwork Statistics:")
print(f"  Nodes: {S.number_of_nodes()}")
print(f"  Links: {S.number_of_links()}")

# Analyze degree distribution
degrees = [d for n, d in S.graph.degree()]
print(f"\nDegree Statistics:")
print(f"  Average degree: {sum(degrees) / len(degrees):.2f}")
print(f"  Max degree: {max(degrees)}")
print(f"  Min degree: {min(degrees)}")
