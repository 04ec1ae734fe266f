"""Adapters that produce raw algorithm output from NetworkX graphs."""
