"""Build a directed import graph from resolved package metadata."""

import networkx as nx
from typing import Dict, List, Set
from ..catalog.models import FOREIGN_IMPORT, PackageMetadata
from ..utils.logging import get_logger

logger = get_logger("graph.import_graph")


class ImportGraph:
    """Directed import graph: nodes=packages, edges=importer -> imported."""
    
    def __init__(self):
        self.graph = nx.DiGraph()
    
    def add_package(self, metadata: PackageMetadata) -> None:
        """Add a package and its direct import edges."""
        self.graph.add_node(metadata.import_path, standard=metadata.standard)
        for imported in metadata.imports:
            self.graph.add_edge(metadata.import_path, imported)
    
    def build_from_metadata(self, entries: Dict[str, PackageMetadata]) -> None:
        """Build complete graph from a metadata cache snapshot."""
        for import_path in sorted(entries):
            self.add_package(entries[import_path])
        logger.info(f"Built import graph with {self.graph.number_of_nodes()} nodes and {self.graph.number_of_edges()} edges")
    
    def is_standard(self, import_path: str) -> bool:
        return bool(self.graph.nodes[import_path].get("standard", False)) if import_path in self.graph else False
    
    def reachable(self, import_path: str) -> Set[str]:
        """Local packages reachable from import_path, excluding itself."""
        if import_path not in self.graph:
            return set()
        return {
            node for node in nx.descendants(self.graph, import_path)
            if node not in (import_path, FOREIGN_IMPORT) and not self.is_standard(node)
        }
    
    def find_cycles(self) -> List[List[str]]:
        """Import cycles, each rotated to start at its smallest member."""
        cycles = []
        for cycle in nx.simple_cycles(self.graph):
            start = cycle.index(min(cycle))
            cycles.append(cycle[start:] + cycle[:start])
        return sorted(cycles)
