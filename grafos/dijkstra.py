"""Shortest paths, random graph generation and edge duplication."""

from __future__ import annotations

import argparse
import heapq
import itertools
import math
import random
import sys

from .grafo import Aresta, Grafo, Vertice


def dijkstra(grafo: Grafo, inicio: Vertice, destino: Vertice) -> tuple[int, list[Aresta]]:
    """Return the shortest distance and edge path from ``inicio`` to ``destino``.

    If ``destino`` cannot be reached the result is ``(-1, [])``.
    """
    distancias: dict[Vertice, float] = {v: math.inf for v in grafo.vertices}
    distancias[inicio] = 0
    anterior: dict[Vertice, tuple[Vertice, Aresta]] = {}
    desempate = itertools.count()
    fila = [(0, next(desempate), inicio)]

    while fila:
        distancia, _, atual = heapq.heappop(fila)
        if distancia > distancias[atual]:
            continue
        for aresta in atual.arestas:
            nova = distancias[atual] + aresta.peso
            if nova < distancias.get(aresta.destino, math.inf):
                distancias[aresta.destino] = nova
                heapq.heappush(fila, (nova, next(desempate), aresta.destino))
                anterior[aresta.destino] = (atual, aresta)
        if atual is destino:
            break

    if distancias.get(destino, math.inf) == math.inf:
        return -1, []

    caminho: list[Aresta] = []
    atual = destino
    while atual is not inicio:
        atual, aresta = anterior[atual]
        caminho.append(aresta)
    caminho.reverse()
    return int(distancias[destino]), caminho


def gerar_grafo_aleatorio(
    qtd_vertices: int,
    peso_max: int,
    grau_max: int,
    rng: random.Random | None = None,
) -> Grafo:
    """Build a random undirected graph with vertices numbered ``0..qtd_vertices-1``.

    Each vertex adds up to ``grau_max`` edges to random other vertices, with
    weights from 1 to ``peso_max - 1``.
    """
    grafo = Grafo()
    for i in range(qtd_vertices):
        grafo.adicionar_vertice(Vertice(i))
    if qtd_vertices <= 1:
        return grafo
    if peso_max < 2:
        raise ValueError("peso_max must be at least 2")

    rng = rng if rng is not None else random.Random()
    limite = min(grau_max, qtd_vertices - 1)
    for origem in grafo.vertices:
        adicionadas = 0
        while adicionadas < limite:
            alvo = grafo.vertices[rng.randrange(qtd_vertices)]
            if alvo is origem:
                continue
            peso = rng.randint(1, peso_max - 1)
            origem.adicionar_aresta(peso, alvo)
            alvo.adicionar_aresta(peso, origem)
            adicionadas += 1
    return grafo


def duplicar_arestas(inicio: Vertice, arestas: list[Aresta]) -> None:
    """Add a parallel copy, in both directions, of the path ``arestas`` starting at ``inicio``."""
    if not arestas:
        raise ValueError("cannot duplicate an empty path")
    primeira = arestas[0]
    inicio.adicionar_aresta(primeira.peso, primeira.destino)
    primeira.destino.adicionar_aresta(primeira.peso, inicio)
    for atual, proxima in itertools.pairwise(arestas):
        atual.destino.adicionar_aresta(proxima.peso, proxima.destino)
        proxima.destino.adicionar_aresta(proxima.peso, atual.destino)


def main(argv: list[str] | None = None) -> int:
    """Generate a random graph and duplicate the shortest path between two odd vertices."""
    parser = argparse.ArgumentParser(prog="dijkstra")
    parser.add_argument("--vertices", type=int, default=789)
    parser.add_argument("--peso-max", type=int, default=12)
    parser.add_argument("--grau", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    grafo = gerar_grafo_aleatorio(
        args.vertices, args.peso_max, args.grau, random.Random(args.seed)
    )
    grafo.imprimir_grafo()

    impares = [v for v in grafo.vertices if v.grau % 2 != 0][:2]
    if len(impares) < 2:
        print("fewer than two odd-degree vertices", file=sys.stderr)
        return 1
    inicio, fim = impares

    distancia, caminho = dijkstra(grafo, inicio, fim)
    print(f"Distancia: {distancia}")
    print(fim.grau)
    print("Pesos: " + "".join(f"{aresta.peso} " for aresta in caminho))
    if not caminho:
        print("no path between the chosen vertices", file=sys.stderr)
        return 1
    duplicar_arestas(inicio, caminho)
    print(fim.grau)
    print("".join(f"{aresta.destino.id} " for aresta in inicio.arestas))
    return 0


if __name__ == "__main__":
    sys.exit(main())