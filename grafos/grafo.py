"""Core graph structures: weighted edges, vertices with degree, and graphs."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Aresta:
    """A weighted edge pointing at a destination vertex."""

    peso: int = 0
    destino: Vertice | None = field(default=None, repr=False)


@dataclass(eq=False)
class Vertice:
    """A vertex holding its outgoing edges and its degree."""

    id: int = 0
    arestas: list[Aresta] = field(default_factory=list, repr=False)
    grau: int = 0

    def adicionar_aresta(self, peso: int, destino: Vertice) -> Aresta:
        """Append an edge to ``destino`` and increase the degree."""
        aresta = Aresta(peso, destino)
        self.arestas.append(aresta)
        self.grau += 1
        return aresta


@dataclass(eq=False)
class Grafo:
    """A graph as an ordered list of vertices."""

    vertices: list[Vertice] = field(default_factory=list)

    @property
    def ordem(self) -> int:
        """Number of vertices in the graph."""
        return len(self.vertices)

    def adicionar_vertice(self, v: Vertice) -> None:
        """Append a vertex to the graph."""
        self.vertices.append(v)

    def imprimir_grafo(self, file: TextIO | None = None) -> None:
        """Write each vertex id followed by its edges, one vertex per line."""
        saida = sys.stdout if file is None else file
        for vertice in self.vertices:
            arestas = "".join(
                f"{{{aresta.destino.id},peso:{aresta.peso}}}"
                for aresta in vertice.arestas
            )
            saida.write(f"{vertice.id} {arestas}\n")