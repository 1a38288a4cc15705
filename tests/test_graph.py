from dsapractice.graph import Graph


def test_undirected_edge_goes_both_ways():
    g = Graph()
    g.add_edge(1, 2)
    assert g.neighbours(1) == [2]
    assert g.neighbours(2) == [1]


def test_directed_edge_goes_one_way():
    g = Graph()
    g.add_edge(1, 2, directed=True)
    assert g.neighbours(1) == [2]
    assert g.neighbours(2) == []
    assert 2 not in g


def test_directed_format():
    g = Graph()
    g.add_edge(1, 2, directed=True)
    assert g.format_adjacency() == "Adjacency List: \n1->2, \n"


def test_undirected_format():
    g = Graph()
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    assert g.format_adjacency() == "Adjacency List: \n1->2, 3, \n2->1, \n3->1, \n"


def test_empty_graph_format():
    assert Graph().format_adjacency() == "Adjacency List: \n"


def test_neighbours_keep_insertion_order():
    g = Graph()
    targets = [5, 3, 9, 1]
    for t in targets:
        g.add_edge(0, t, directed=True)
    assert g.neighbours(0) == targets


def test_parallel_edges_are_kept():
    g = Graph()
    g.add_edge(1, 2)
    g.add_edge(1, 2)
    assert g.neighbours(1) == [2, 2]
    assert g.neighbours(2) == [1, 1]


def test_format_has_line_per_node():
    g = Graph()
    edges = [(0, 1), (1, 2), (2, 3), (3, 0)]
    for u, v in edges:
        g.add_edge(u, v)
    assert len(g.format_adjacency().splitlines()) == len(g) + 1


def test_undirected_degree_sum_is_twice_edges():
    g = Graph()
    edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
    for u, v in edges:
        g.add_edge(u, v)
    assert sum(len(g.neighbours(n)) for n in g) == 2 * len(edges)


def test_neighbours_returns_copy():
    g = Graph()
    g.add_edge(1, 2)
    g.neighbours(1).append(99)
    assert g.neighbours(1) == [2]