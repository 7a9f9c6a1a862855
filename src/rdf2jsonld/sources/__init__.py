"""
Triple sources subpackage - requires rdflib.

Helpers that produce triple sequences from graphs, files and SPARQL endpoints.
"""

from rdf2jsonld.sources.graph import (
    triples_from_graph,
    load_graph,
    triples_from_file,
)

from rdf2jsonld.sources.sparql import triples_from_construct

__all__ = [
    # graph
    "triples_from_graph",
    "load_graph",
    "triples_from_file",
    # sparql
    "triples_from_construct",
]
