"""Weighted graphs with shortest paths, random generation, matchings and Eulerian circuits."""

__version__ = "0.1.0"
__all__ = ["grafo", "dijkstra", "emparelhamento", "hierholzer"]