"""Result interpretation and enumeration algorithms.

- ``paths``: turn predecessor tables into explicit paths.
- ``flow``: normalize flow-algorithm output.
- ``mst``: minimum spanning tree over a ``StrictGraph``.
- ``spanning_trees``: enumerate spanning trees by chord substitution.
"""
