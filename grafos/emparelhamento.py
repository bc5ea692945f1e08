"""Odd-degree vertices and enumeration of perfect matchings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .grafo import Grafo, Vertice


def impares(grafo: Grafo) -> list[Vertice]:
    """Return the vertices of odd degree, in graph order."""
    return [v for v in grafo.vertices if v.grau % 2]


def emparelhamentos(restantes: Sequence[Vertice]) -> list[list[tuple[Vertice, Vertice]]]:
    """Return every perfect matching of ``restantes`` as lists of vertex pairs.

    An odd number of vertices has no perfect matching, giving an empty list.
    """
    if not restantes:
        return [[]]
    u = restantes[0]
    resultado: list[list[tuple[Vertice, Vertice]]] = []
    for v in restantes:
        if v is u:
            continue
        novos = [x for x in restantes if x is not u and x is not v]
        for resto in emparelhamentos(novos):
            resultado.append([(u, v), *resto])
    return resultado


def main(argv: list[str] | None = None) -> int:
    """Print every perfect matching of a graph with the given number of vertices."""
    parser = argparse.ArgumentParser(prog="emparelhamento")
    parser.add_argument("n", type=int, nargs="?", default=None)
    args = parser.parse_args(argv)
    n = args.n if args.n is not None else int(sys.stdin.read().split()[0])

    grafo = Grafo()
    for i in range(n):
        grafo.adicionar_vertice(Vertice(i))

    resultado = emparelhamentos(grafo.vertices)
    if not resultado:
        print("Nenhum emparelhamento")
    for numero, emparelhamento in enumerate(resultado, start=1):
        print(f"Emparelhamento {numero}:")
        print("".join(f"({a.id}, {b.id}) " for a, b in emparelhamento))
    return 0


if __name__ == "__main__":
    sys.exit(main())