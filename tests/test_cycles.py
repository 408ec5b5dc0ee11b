"""Tests for the three-color DFS cycle detector."""

from cyclic_dependencies.analysis.cycles import find_cycles
from cyclic_dependencies.analysis.package_graph import build_package_graph
from cyclic_dependencies.models import Cycle, PackageRecord


# ── Helpers ───────────────────────────────────────────────────

def _path(name):
    return f"packages/{name}/package.json"


def _records(dependencies):
    return {
        name: PackageRecord(name=name, manifest_path=_path(name), declared_dependencies=tuple(deps))
        for name, deps in dependencies.items()
    }


def _find(dependencies):
    return find_cycles(build_package_graph(_records(dependencies)))


def _cycle(*names):
    return Cycle(nodes=names, manifest_paths=tuple(_path(n) for n in names))


NUMBERS = ["one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]


# ── No cycles ─────────────────────────────────────────────────

class TestAcyclic:
    def test_empty_graph(self):
        assert find_cycles({}) == []

    def test_isolated_nodes(self):
        assert _find({"a": [], "b": [], "c": []}) == []

    def test_chain(self):
        assert _find({"a": ["b"], "b": ["c"], "c": []}) == []

    def test_diamond(self):
        # c is reached twice, the second time already done
        assert _find({"a": ["b", "c"], "b": ["c"], "c": []}) == []

    def test_external_dependencies_never_form_cycles(self):
        assert _find({"a": ["react", "b"], "b": ["lodash", "react"]}) == []


# ── Single cycles ─────────────────────────────────────────────

class TestSingleCycle:
    def test_direct_cycle(self):
        cycles = _find({"example1": ["example2"], "example2": ["example1"]})
        assert cycles == [_cycle("example1", "example2", "example1")]

    def test_larger_ring_starts_at_smallest_root(self):
        ring = {name: [NUMBERS[(i + 1) % 9]] for i, name in enumerate(NUMBERS)}
        cycles = _find(ring)
        assert len(cycles) == 1
        assert list(cycles[0].nodes) == [
            "eight", "nine", "one", "two", "three",
            "four", "five", "six", "seven", "eight",
        ]

    def test_small_cycle_in_larger_project(self):
        cycles = _find({
            "a": ["b"], "b": ["c"], "c": ["d"],
            "d": ["e"], "e": ["f"], "f": ["d"],
            "g": ["a"],
        })
        assert cycles == [_cycle("d", "e", "f", "d")]

    def test_cycle_length_matches_ring_size(self):
        for size in range(2, 7):
            names = [f"p{i}" for i in range(size)]
            ring = {name: [names[(i + 1) % size]] for i, name in enumerate(names)}
            cycles = _find(ring)
            assert len(cycles) == 1
            assert len(cycles[0].nodes) == size + 1
            assert len(cycles[0].manifest_paths) == size + 1
            assert len(cycles[0]) == size

    def test_start_is_first_node_on_path_not_smallest(self):
        # a reaches c first, so the b <-> c cycle is reported from c
        cycles = _find({"a": ["c"], "b": ["c"], "c": ["b"]})
        assert cycles == [_cycle("c", "b", "c")]


# ── Self loops ────────────────────────────────────────────────

class TestSelfLoop:
    def test_self_loop_at_root(self):
        assert _find({"x": ["x"]}) == [_cycle("x", "x")]

    def test_self_loop_below_root(self):
        assert _find({"a": ["x"], "x": ["x"]}) == [_cycle("x", "x")]

    def test_duplicate_self_loop_edges_reported_twice(self):
        records = {
            "a": PackageRecord("a", _path("a"), ("a", "a")),
        }
        cycles = find_cycles(build_package_graph(records))
        assert cycles == [_cycle("a", "a"), _cycle("a", "a")]


# ── Multiple cycles ───────────────────────────────────────────

class TestMultipleCycles:
    def test_disjoint_cycles(self):
        cycles = _find({
            "a": ["b"], "b": ["c"], "c": ["a"],
            "d": ["e"], "e": ["f"], "f": ["g"], "g": ["d"],
        })
        assert cycles == [
            _cycle("a", "b", "c", "a"),
            _cycle("d", "e", "f", "g", "d"),
        ]

    def test_overlapping_cycles_share_nodes(self):
        cycles = _find({"a": ["b"], "b": ["a", "c"], "c": ["a"]})
        assert cycles == [
            _cycle("a", "b", "a"),
            _cycle("a", "b", "c", "a"),
        ]

    def test_duplicate_edge_does_not_repeat_cycle(self):
        records = {
            "a": PackageRecord("a", _path("a"), ("b", "b")),
            "b": PackageRecord("b", _path("b"), ("a",)),
        }
        cycles = find_cycles(build_package_graph(records))
        assert cycles == [_cycle("a", "b", "a")]

    def test_no_dependencies_between_packages(self):
        assert _find({name: [] for name in NUMBERS}) == []


# ── Determinism ───────────────────────────────────────────────

class TestDeterminism:
    GRAPH = {
        "d": ["e"], "e": ["f"], "f": ["g"], "g": ["d"],
        "a": ["b"], "b": ["c"], "c": ["a"],
    }

    def test_idempotent(self):
        graph = build_package_graph(_records(self.GRAPH))
        assert find_cycles(graph) == find_cycles(graph)

    def test_independent_of_insertion_order(self):
        forward = _find(self.GRAPH)
        backward = _find(dict(reversed(list(self.GRAPH.items()))))
        assert forward == backward

    def test_manifest_paths_are_index_aligned(self):
        graph = build_package_graph(_records(self.GRAPH))
        for cycle in find_cycles(graph):
            assert cycle.nodes[0] == cycle.nodes[-1]
            for name, path in zip(cycle.nodes, cycle.manifest_paths):
                assert graph[name].manifest_path == path

    def test_deep_chain_does_not_recurse(self):
        names = [f"n{i:05d}" for i in range(5000)]
        ring = {name: [names[(i + 1) % len(names)]] for i, name in enumerate(names)}
        cycles = _find(ring)
        assert len(cycles) == 1
        assert cycles[0].nodes[0] == "n00000"
        assert len(cycles[0].nodes) == 5001
