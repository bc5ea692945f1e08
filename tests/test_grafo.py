import io

from grafos.grafo import Aresta, Grafo, Vertice


def _grafo(n):
    g = Grafo()
    for i in range(n):
        g.adicionar_vertice(Vertice(i))
    return g


def test_adicionar_vertice_aumenta_ordem():
    g = _grafo(3)
    assert g.ordem == 3
    assert [v.id for v in g.vertices] == [0, 1, 2]


def test_adicionar_aresta_aumenta_grau():
    a, b = Vertice(0), Vertice(1)
    a.adicionar_aresta(7, b)
    a.adicionar_aresta(2, b)
    assert a.grau == 2
    assert b.grau == 0
    assert [x.peso for x in a.arestas] == [7, 2]
    assert all(x.destino is b for x in a.arestas)


def test_aresta_padrao():
    aresta = Aresta()
    assert aresta.peso == 0
    assert aresta.destino is None


def test_vertices_comparam_por_identidade():
    a, b = Vertice(0), Vertice(0)
    assert a != b
    assert len({a, b}) == 2


def test_imprimir_grafo_formato():
    g = _grafo(2)
    a, b = g.vertices
    a.adicionar_aresta(5, b)
    b.adicionar_aresta(5, a)
    saida = io.StringIO()
    g.imprimir_grafo(saida)
    assert saida.getvalue() == "0 {1,peso:5}\n1 {0,peso:5}\n"


def test_imprimir_grafo_stdout(capsys):
    g = _grafo(1)
    g.imprimir_grafo()
    assert capsys.readouterr().out == "0 \n"


def test_repr_nao_recursivo():
    a, b = Vertice(0), Vertice(1)
    a.adicionar_aresta(1, b)
    b.adicionar_aresta(1, a)
    assert "Vertice" in repr(a)
    assert "Aresta" in repr(a.arestas[0])