# grafos

A small collection of graph algorithms over an in-memory weighted graph:
shortest paths with Dijkstra's algorithm, random graph generation,
enumeration of perfect matchings, and cycle decomposition with assembly of
an Eulerian circuit.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The graph model

`grafos.grafo` defines three classes:

- `Aresta(peso, destino)`: an edge with a weight (`peso`) and a target
  vertex (`destino`).
- `Vertice(id)`: a vertex with an `id`, its list of `arestas` and its
  degree (`grau`). `adicionar_aresta(peso, destino)` appends one directed
  edge, increases the degree by one and returns the new edge. For an
  undirected edge, add it from both ends.
- `Grafo`: the list of `vertices`. The `ordem` property gives the number of
  vertices. `adicionar_vertice(v)` appends a vertex. `imprimir_grafo(file=None)`
  writes one line per vertex, in the form `id {destino,peso:p}...`, to
  `file`, or to standard output when no file is given.

```python
from grafos.grafo import Grafo, Vertice

g = Grafo()
for i in range(3):
    g.adicionar_vertice(Vertice(i))

a, b, c = g.vertices
a.adicionar_aresta(4, b); b.adicionar_aresta(4, a)
b.adicionar_aresta(1, c); c.adicionar_aresta(1, b)
```

## Shortest paths (`grafos.dijkstra`)

```python
from grafos.dijkstra import dijkstra

distancia, caminho = dijkstra(g, a, c)
# distancia == 5; caminho is the list of Aresta objects from a to c
```

If the target cannot be reached, the result is `(-1, [])`.

`gerar_grafo_aleatorio(qtd_vertices, peso_max, grau_max, rng=None)` builds a
random undirected graph with vertices numbered `0..qtd_vertices-1`. Each
vertex adds up to `grau_max` edges to other randomly chosen vertices. An
edge is never added from a vertex to itself, but parallel edges are possible.
Weights are drawn from 1 to `peso_max - 1`. Pass a `random.Random` instance
as `rng` for reproducible graphs. With more than one vertex, a `peso_max`
below 2 raises `ValueError`.

`duplicar_arestas(inicio, arestas)` adds a parallel copy, in both
directions, of every edge along the path `arestas` that starts at `inicio`.
It raises `ValueError` for an empty path.

## Matchings (`grafos.emparelhamento`)

`impares(grafo)` returns the vertices of odd degree, in graph order.

`emparelhamentos(restantes)` returns every perfect matching of the given
vertices as a list of lists of `(Vertice, Vertice)` pairs. An empty sequence
gives `[[]]`. An odd number of vertices gives `[]`.

## Eulerian circuits (`grafos.hierholzer`)

`encontrar_ciclos(grafo, inicio=0)` walks unused edges depth-first from the
vertex with id `inicio`. It returns the cycles closed along the way as lists
of vertex ids.

`montar_euleriano(ciclos)` joins the cycles into one circuit. Each cycle
after the first is inserted right after the first occurrence of its
starting vertex. If a cycle's start is not on the circuit built so far,
`ValueError` is raised.

## Commands

```
grafos-dijkstra [--vertices N] [--peso-max P] [--grau G] [--seed S]
```

This command generates a random graph (defaults: 789 vertices, `peso_max`
12, degree 4) and prints it. It then takes the first two odd-degree
vertices and finds the shortest path between them. It prints:

- the distance,
- the second vertex's degree,
- the edge weights along the path.

Next it duplicates the path and prints:

- the second vertex's degree again,
- the destination ids of the first vertex's edges.

It exits with status 1 if there are fewer than two odd-degree vertices, or
if no path exists between them.

```
grafos-emparelhamento [N]
```

This command builds a graph of `N` vertices and prints every perfect
matching of them, numbered from 1. If `N` is not given, it reads the count
from standard input. If there is no matching, it prints
`Nenhum emparelhamento`.

```
grafos-hierholzer [ARQUIVO]
```

This command reads the vertex and edge counts, followed by one edge per
line with vertices numbered from 1, from `ARQUIVO` or from standard input.
It prints each cycle found from vertex 1, then the assembled circuit, also
numbered from 1. Example input:

```
6 10
1 2
1 3
2 3
2 4
2 5
3 4
3 5
4 5
4 6
5 6
```

## What it does not do

The pieces are separate. No single function or command takes a graph with
odd-degree vertices, pairs those vertices, duplicates the chosen shortest
paths and then produces the final circuit. `grafos-emparelhamento` matches
all vertices of an edgeless graph, not only the odd ones of a given graph.
`encontrar_ciclos` does not check whether the graph actually has an
Eulerian circuit.