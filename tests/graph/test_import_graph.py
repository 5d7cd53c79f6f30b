"""Tests for the networkx import graph."""

from tainted.catalog.models import PackageMetadata
from tainted.graph.import_graph import ImportGraph


def _graph(entries):
    graph = ImportGraph()
    graph.build_from_metadata({e.import_path: e for e in entries})
    return graph


class TestImportGraph:
    
    def test_build(self):
        graph = _graph([
            PackageMetadata(import_path="a", imports=["b", "fmt"]),
            PackageMetadata(import_path="b", imports=[]),
            PackageMetadata(import_path="fmt", standard=True),
        ])
        
        assert graph.graph.number_of_nodes() == 3
        assert graph.graph.number_of_edges() == 2
    
    def test_reachable_skips_standard_and_foreign(self):
        graph = _graph([
            PackageMetadata(import_path="a", imports=["b", "fmt", "C"]),
            PackageMetadata(import_path="b", imports=["a"]),
            PackageMetadata(import_path="fmt", standard=True),
        ])
        
        assert graph.reachable("a") == {"b"}
        assert graph.reachable("unknown") == set()
    
    def test_find_cycles(self):
        graph = _graph([
            PackageMetadata(import_path="c", imports=["a"]),
            PackageMetadata(import_path="a", imports=["b"]),
            PackageMetadata(import_path="b", imports=["c"]),
            PackageMetadata(import_path="d", imports=["a"]),
        ])
        
        assert graph.find_cycles() == [["a", "b", "c"]]
    
    def test_no_cycles(self):
        graph = _graph([PackageMetadata(import_path="a", imports=["b"]), PackageMetadata(import_path="b")])
        assert graph.find_cycles() == []
