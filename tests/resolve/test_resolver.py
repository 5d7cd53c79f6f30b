"""Tests for the import resolver."""

import pytest
from tainted.graph.import_graph import ImportGraph
from tainted.resolve import ImportResolver, MetadataCache
from tainted.utils.errors import ResolutionError


class TestResolveClosure:
    """Closure contents."""
    
    def test_chain(self, make_catalog):
        """Transitive dependencies are all reported."""
        catalog = make_catalog({"a": ["b"], "b": ["c"], "c": []})
        resolver = ImportResolver(catalog)
        
        assert resolver.resolve("a") == {"b", "c"}
        assert resolver.resolve("b") == {"c"}
        assert resolver.resolve("c") == set()
    
    def test_cycle_terminates(self, make_catalog):
        """A -> B -> A resolves to {B}."""
        catalog = make_catalog({"a": ["b"], "b": ["a"]})
        resolver = ImportResolver(catalog)
        
        assert resolver.resolve("a") == {"b"}
        assert resolver.resolve("b") == {"a"}
    
    def test_self_import_excluded(self, make_catalog):
        catalog = make_catalog({"a": ["a", "b"], "b": []})
        assert ImportResolver(catalog).resolve("a") == {"b"}
    
    def test_diamond(self, make_catalog):
        """Shared dependency D is counted once and fetched once."""
        catalog = make_catalog({"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []})
        resolver = ImportResolver(catalog)
        
        assert resolver.resolve("a") == {"b", "c", "d"}
        assert catalog.calls["d"] == 1
    
    def test_standard_packages_excluded(self, make_catalog):
        """Standard packages are visited but never reported or descended."""
        catalog = make_catalog(
            {"app": ["fmt", "lib"], "lib": ["os"], "fmt": ["internal/fmtsort"]},
            standard=("fmt", "os", "internal/fmtsort"),
        )
        resolver = ImportResolver(catalog)
        
        assert resolver.resolve("app") == {"lib"}
        assert "fmt" in resolver.cache
        assert catalog.calls["internal/fmtsort"] == 0
    
    def test_standard_root_is_empty(self, make_catalog):
        catalog = make_catalog({"fmt": []}, standard=("fmt",))
        assert ImportResolver(catalog).resolve("fmt") == set()
    
    def test_foreign_import_is_leaf(self, make_catalog):
        """The cgo pseudo-import is never fetched nor reported."""
        catalog = make_catalog({"app": ["C", "lib"], "lib": []}, missing=("C",))
        resolver = ImportResolver(catalog)
        
        assert resolver.resolve("app") == {"lib"}
        assert catalog.calls["C"] == 0
    
    def test_matches_reference_reachability(self, make_catalog):
        """Resolver agrees with networkx descendants on a tangled graph."""
        edges = {
            "a": ["b", "c", "fmt"],
            "b": ["d", "e"],
            "c": ["e", "a"],
            "d": ["f", "os"],
            "e": ["d", "g"],
            "f": ["b"],
            "g": [],
            "h": ["a"],
        }
        catalog = make_catalog(edges, standard=("fmt", "os"))
        resolver = ImportResolver(catalog)
        for name in edges:
            resolver.resolve(name)
        
        graph = ImportGraph()
        graph.build_from_metadata(resolver.cache.snapshot())
        for name in edges:
            assert resolver.resolve(name) == graph.reachable(name), name


class TestResolverCaching:
    """Metadata cache behaviour across resolve() calls."""
    
    def test_idempotent_same_cache(self, make_catalog):
        catalog = make_catalog({"a": ["b", "c"], "b": ["c"], "c": []})
        resolver = ImportResolver(catalog)
        
        first = resolver.resolve("a")
        second = resolver.resolve("a")
        
        assert first == second
        assert all(count == 1 for count in catalog.calls.values())
    
    def test_idempotent_fresh_cache(self, make_catalog):
        catalog = make_catalog({"a": ["b", "c"], "b": ["c"], "c": []})
        
        first = ImportResolver(catalog, MetadataCache()).resolve("a")
        second = ImportResolver(catalog, MetadataCache()).resolve("a")
        
        assert first == second == {"b", "c"}
    
    def test_shared_cache_amortizes_lookups(self, make_catalog):
        catalog = make_catalog({"x": ["common"], "y": ["common"], "common": ["leaf"], "leaf": []})
        cache = MetadataCache()
        
        ImportResolver(catalog, cache).resolve("x")
        ImportResolver(catalog, cache).resolve("y")
        
        assert catalog.calls["common"] == 1
        assert catalog.calls["leaf"] == 1
        assert cache.hits >= 2


class TestResolverErrors:
    """Unresolvable imports."""
    
    def test_missing_dependency_raises(self, make_catalog):
        catalog = make_catalog({"app": ["lib"], "lib": ["gone"]}, missing=("gone",))
        resolver = ImportResolver(catalog)
        
        with pytest.raises(ResolutionError, match="gone") as exc_info:
            resolver.resolve("app")
        
        assert exc_info.value.import_path == "gone"
        assert exc_info.value.root_package == "app"
    
    def test_missing_root_raises(self, make_catalog):
        catalog = make_catalog({"app": []})
        with pytest.raises(ResolutionError):
            ImportResolver(catalog).resolve("nope")
    
    def test_failed_fetch_not_cached(self, make_catalog):
        catalog = make_catalog({"app": ["gone"]}, missing=("gone",))
        resolver = ImportResolver(catalog)
        
        for _ in range(2):
            with pytest.raises(ResolutionError):
                resolver.resolve("app")
        
        assert "gone" not in resolver.cache
        assert catalog.calls["gone"] == 2
