import pytest

from grafos.emparelhamento import emparelhamentos, impares, main
from grafos.grafo import Grafo, Vertice


def _vertices(n):
    return [Vertice(i) for i in range(n)]


def test_impares():
    g = Grafo()
    for v in _vertices(4):
        g.adicionar_vertice(v)
    a, b, c, d = g.vertices
    a.adicionar_aresta(1, b)
    b.adicionar_aresta(1, a)
    a.adicionar_aresta(1, c)
    c.adicionar_aresta(1, a)
    assert impares(g) == [b, c]


def test_vazio_tem_um_emparelhamento_vazio():
    assert emparelhamentos([]) == [[]]


def test_dois_vertices():
    a, b = _vertices(2)
    assert emparelhamentos([a, b]) == [[(a, b)]]


@pytest.mark.parametrize("n", [1, 3, 5])
def test_quantidade_impar_sem_emparelhamento(n):
    assert emparelhamentos(_vertices(n)) == []


def test_quatro_vertices():
    vs = _vertices(4)
    resultado = emparelhamentos(vs)
    ids = [[(a.id, b.id) for a, b in m] for m in resultado]
    assert ids == [[(0, 1), (2, 3)], [(0, 2), (1, 3)], [(0, 3), (1, 2)]]


@pytest.mark.parametrize("n", [2, 4, 6])
def test_cada_emparelhamento_cobre_todos(n):
    vs = _vertices(n)
    resultado = emparelhamentos(vs)
    chaves = set()
    for m in resultado:
        cobertos = [x.id for par in m for x in par]
        assert sorted(cobertos) == list(range(n))
        chaves.add(frozenset(frozenset((a.id, b.id)) for a, b in m))
    assert len(chaves) == len(resultado)


def test_entrada_nao_modificada():
    vs = _vertices(4)
    copia = list(vs)
    emparelhamentos(vs)
    assert vs == copia


def test_main_lista_emparelhamentos(capsys):
    assert main(["4"]) == 0
    saida = capsys.readouterr().out
    assert "Emparelhamento 3:" in saida
    assert "Emparelhamento 4:" not in saida
    assert "(0, 1) (2, 3) " in saida


def test_main_impar(capsys):
    assert main(["3"]) == 0
    assert "Emparelhamento" not in capsys.readouterr().out