"""
rdf2jsonld - Turn RDF triples into JSON-LD node objects.

This package is organized into focused subpackages:

- convert/  The conversion core (requires rdflib)
            - terms: subject_key, predicate_key, object_value
            - accumulator: GraphAccumulator
            - nodes: NodeBuilder, serialize_nodes
            - rdf_to_jsonld: rdf_to_jsonld

- sources/  Triple sources (requires rdflib)
            - graph: triples_from_graph, load_graph, triples_from_file
            - sparql: triples_from_construct

- sparql/   SPARQL client (urllib only)
            - client: SPARQLClient
            - retry: with_retry, RetryConfig

- rdf/      RDF namespace constants
            - namespaces: RDF_TYPE, XSD_STRING, COMMON_NAMESPACES

- cli       Command line interface (requires fire)

Usage:
    from rdflib import Graph
    from rdf2jsonld import rdf_to_jsonld, triples_from_graph

    g = Graph().parse("people.ttl")
    document = rdf_to_jsonld(triples_from_graph(g))
"""

__version__ = "0.1.0"

from rdf2jsonld.convert import (
    rdf_to_jsonld,
    GraphAccumulator,
    NodeBuilder,
    serialize_nodes,
    TripleSourceError,
)

from rdf2jsonld.sources import (
    triples_from_graph,
    triples_from_file,
    triples_from_construct,
)

__all__ = [
    "__version__",
    # convert
    "rdf_to_jsonld",
    "GraphAccumulator",
    "NodeBuilder",
    "serialize_nodes",
    "TripleSourceError",
    # sources
    "triples_from_graph",
    "triples_from_file",
    "triples_from_construct",
]
