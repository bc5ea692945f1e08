"""Cycle decomposition and Eulerian circuit assembly."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from .grafo import Aresta, Grafo, Vertice


def encontrar_ciclos(grafo: Grafo, inicio: int = 0) -> list[list[int]]:
    """Walk unused edges depth-first from vertex id ``inicio`` and return the cycles closed."""
    ciclos: list[list[int]] = []
    sequencia: list[int] = []
    visitadas: set[tuple[int, int]] = set()
    pilha: list[tuple[int, Iterator[Aresta]]] = [
        (inicio, iter(grafo.vertices[inicio].arestas))
    ]

    while pilha:
        v, restantes = pilha[-1]
        for aresta in restantes:
            w = aresta.destino.id
            if (v, w) in visitadas:
                continue
            sequencia.append(v)
            visitadas.add((v, w))
            visitadas.add((w, v))
            if w in sequencia:
                sequencia.append(w)
                ciclos.append(sequencia)
                sequencia = []
            pilha.append((w, iter(grafo.vertices[w].arestas)))
            break
        else:
            pilha.pop()
    return ciclos


def montar_euleriano(ciclos: list[list[int]]) -> list[int]:
    """Splice cycles into one circuit, each after the first occurrence of its start."""
    euleriano: list[int] = []
    for ciclo in ciclos:
        if not euleriano:
            euleriano.extend(ciclo)
            continue
        try:
            posicao = euleriano.index(ciclo[0])
        except ValueError:
            raise ValueError(f"cycle start {ciclo[0]} is not on the circuit") from None
        euleriano[posicao + 1:posicao + 1] = ciclo[1:]
    return euleriano


def _ler_grafo(texto: str) -> Grafo:
    numeros = [int(t) for t in texto.split()]
    if len(numeros) < 2:
        raise ValueError("expected vertex and edge counts")
    qtd_vertices, qtd_arestas = numeros[0], numeros[1]
    pares = numeros[2:2 + 2 * qtd_arestas]
    if len(pares) < 2 * qtd_arestas:
        raise ValueError("missing edges in input")
    grafo = Grafo()
    for i in range(qtd_vertices):
        grafo.adicionar_vertice(Vertice(i))
    for a, b in zip(pares[::2], pares[1::2]):
        origem, destino = grafo.vertices[a - 1], grafo.vertices[b - 1]
        origem.adicionar_aresta(1, destino)
        destino.adicionar_aresta(1, origem)
    return grafo


def main(argv: list[str] | None = None) -> int:
    """Read a graph (1-based edges) and print its cycles and Eulerian circuit."""
    parser = argparse.ArgumentParser(prog="hierholzer")
    parser.add_argument("entrada", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    with args.entrada as entrada:
        grafo = _ler_grafo(entrada.read())

    ciclos = encontrar_ciclos(grafo, 0)
    for ciclo in ciclos:
        print("".join(f"{v + 1} " for v in ciclo))
    print("".join(f"{v + 1} " for v in montar_euleriano(ciclos)))
    return 0


if __name__ == "__main__":
    sys.exit(main())