"""Small generic helpers shared by the algorithms."""
