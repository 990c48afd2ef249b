import pytest

from algokit.graphs import DisjointSet, connected_components, kruskal_mst, prim_mst

PRIM_MATRIX = [
    [0, 4, 6, 0, 0, 0],
    [4, 0, 6, 3, 4, 0],
    [6, 6, 0, 1, 8, 0],
    [0, 3, 1, 0, 2, 3],
    [0, 4, 8, 2, 0, 7],
    [0, 0, 0, 3, 7, 0],
]

KRUSKAL_EDGES = [(0, 1, 1), (1, 3, 3), (3, 2, 4), (2, 0, 2), (0, 3, 2), (1, 2, 2)]


def _matrix_edges(matrix):
    return [
        (i, j, w)
        for i, row in enumerate(matrix)
        for j, w in enumerate(row)
        if j > i and w != 0
    ]


def test_disjoint_set_starts_separate():
    sets = DisjointSet(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_disjoint_set_unite_joins():
    sets = DisjointSet(5)
    sets.unite(0, 1)
    sets.unite(3, 4)
    sets.unite(1, 4)
    assert sets.find(0) == sets.find(3) == sets.find(4) == sets.find(1)
    assert sets.find(2) == 2


def test_disjoint_set_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_connected_components_source_example():
    edges = [(0, 1, 10), (2, 3, 10), (4, 5, 10), (5, 6, 10), (4, 6, 10)]
    assert connected_components(7, edges) == [[0, 1], [2, 3], [4, 5, 6]]


def test_connected_components_isolated_vertices():
    result = connected_components(3, [])
    assert result == [[0], [1], [2]]


def test_connected_components_partition_all_vertices():
    edges = [(0, 4), (4, 2), (1, 3)]
    result = connected_components(6, edges)
    flat = sorted(v for component in result for v in component)
    assert flat == list(range(6))
    assert len(result) == 3


def test_connected_components_bad_vertex():
    with pytest.raises(ValueError):
        connected_components(2, [(0, 5)])


def test_kruskal_source_example():
    assert kruskal_mst(4, KRUSKAL_EDGES) == 5


def test_kruskal_no_edges():
    assert kruskal_mst(3, []) == 0


def test_kruskal_bad_vertex():
    with pytest.raises(ValueError):
        kruskal_mst(2, [(0, 3, 1)])


def test_prim_edges_form_tree_with_matrix_weights():
    tree = prim_mst(PRIM_MATRIX)
    assert len(tree) == len(PRIM_MATRIX) - 1
    assert [child for _, child, _ in tree] == [1, 2, 3, 4, 5]
    for parent, child, weight in tree:
        assert PRIM_MATRIX[parent][child] == weight
        assert weight != 0
    assert len(connected_components(6, tree)) == 1


def test_prim_matches_kruskal_total():
    tree = prim_mst(PRIM_MATRIX)
    assert sum(w for _, _, w in tree) == kruskal_mst(6, _matrix_edges(PRIM_MATRIX))


def test_prim_single_vertex():
    assert prim_mst([[0]]) == []


def test_prim_disconnected():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_not_square():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1, 0, 2]])