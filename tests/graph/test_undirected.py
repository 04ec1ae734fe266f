import networkx as nx
import pytest

from ngtree.graph.undirected import StrictGraph


def build_sample_graph() -> StrictGraph:
    return StrictGraph.from_weighted_edges(
        ["A", "B", "C", "D"],
        [(("A", "B"), 1), (("B", "C"), 2), (("C", "A"), 3), (("C", "D"), 4)],
    )


def test_add_node_duplicate_raises():
    g = StrictGraph()
    g.add_node("A")
    with pytest.raises(ValueError, match="already exists"):
        g.add_node("A")


def test_add_edge_requires_existing_nodes():
    g = StrictGraph()
    g.add_node("A")
    with pytest.raises(ValueError, match="does not exist"):
        g.add_edge("A", "B")
    with pytest.raises(ValueError, match="does not exist"):
        g.add_edge("B", "A")


def test_add_edge_duplicate_raises_in_either_direction():
    g = build_sample_graph()
    with pytest.raises(ValueError, match="already exists"):
        g.add_edge("B", "A", weight=9)
    assert g.edge_weight(("A", "B")) == 1


def test_remove_edge_missing_raises():
    g = build_sample_graph()
    with pytest.raises(ValueError):
        g.remove_edge("A", "D")

    g.remove_edge("B", "A")
    assert not g.has_edge("A", "B")


def test_edges_with_weights_and_default():
    g = build_sample_graph()
    g.add_node("E")
    g.add_edge("D", "E")

    weighted = g.edges_with_weights()
    assert len(weighted) == 5
    assert dict((frozenset(e), w) for e, w in weighted)[frozenset(("D", "E"))] == 1
    assert g.edge_weight(("E", "D"), default=0) == 0


def test_edge_weight_missing_edge_raises():
    with pytest.raises(ValueError, match="not found"):
        build_sample_graph().edge_weight(("A", "D"))


def test_copy_is_independent():
    g = build_sample_graph()
    h = g.copy()
    h.remove_edge("A", "B")
    h["B"]["C"]["weight"] = 99

    assert g.has_edge("A", "B")
    assert g.edge_weight(("B", "C")) == 2
    assert isinstance(h, StrictGraph)


def test_copy_of_frozen_graph_is_mutable():
    g = build_sample_graph().freeze()
    assert nx.is_frozen(g)

    h = g.copy()
    assert not nx.is_frozen(h)
    h.add_node("Z")
    assert "Z" in h and "Z" not in g


def test_get_cycle_starts_at_vertex():
    g = build_sample_graph()
    for start in ("A", "B", "C"):
        cycle = g.get_cycle(start)
        assert cycle[0] == start
        assert sorted(cycle) == ["A", "B", "C"]


def test_get_cycle_oriented_to_end():
    g = StrictGraph.from_weighted_edges(
        [1, 2, 3, 4],
        [((1, 2), 1), ((2, 3), 1), ((3, 4), 1), ((4, 1), 1)],
    )
    assert g.get_cycle(1, end=4) == [1, 2, 3, 4]
    assert g.get_cycle(1, end=2) == [1, 4, 3, 2]


def test_get_cycle_errors():
    g = build_sample_graph()
    with pytest.raises(ValueError, match="does not exist"):
        g.get_cycle("Z")
    with pytest.raises(ValueError, match="not on a cycle"):
        g.get_cycle("D")

    tree = StrictGraph.from_weighted_edges([1, 2], [((1, 2), 1)])
    with pytest.raises(ValueError, match="No cycle"):
        tree.get_cycle(1)


def test_is_tree_and_spans():
    g = build_sample_graph()
    assert not g.is_tree()

    g.remove_edge("A", "C")
    assert g.is_tree()
    assert g.spans(["D", "C", "B", "A"])
    assert not g.spans(["A", "B"])
    assert not StrictGraph().is_tree()


def test_from_networkx_keeps_attributes():
    nxg = nx.Graph()
    nxg.add_node("A", role="core")
    nxg.add_edge("A", "B", weight=5, label="x")

    g = StrictGraph.from_networkx(nxg)
    assert g.nodes["A"]["role"] == "core"
    assert g["A"]["B"] == {"weight": 5, "label": "x"}


@pytest.mark.parametrize("nx_graph", [nx.DiGraph([(1, 2)]), nx.MultiGraph([(1, 2)])])
def test_from_networkx_rejects_unsupported(nx_graph):
    with pytest.raises(ValueError):
        StrictGraph.from_networkx(nx_graph)
