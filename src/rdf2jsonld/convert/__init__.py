"""
Conversion subpackage - requires rdflib.

Term classification, per-subject grouping and node serialization.
"""

from rdf2jsonld.convert.terms import (
    is_supported_subject,
    is_supported_object,
    subject_key,
    predicate_key,
    object_value,
    node_id,
)

from rdf2jsonld.convert.accumulator import GraphAccumulator

from rdf2jsonld.convert.nodes import (
    NodeBuilder,
    serialize_nodes,
)

from rdf2jsonld.convert.errors import TripleSourceError

from rdf2jsonld.convert.rdf_to_jsonld import rdf_to_jsonld

__all__ = [
    # terms
    "is_supported_subject",
    "is_supported_object",
    "subject_key",
    "predicate_key",
    "object_value",
    "node_id",
    # accumulator
    "GraphAccumulator",
    # nodes
    "NodeBuilder",
    "serialize_nodes",
    # errors
    "TripleSourceError",
    # rdf_to_jsonld
    "rdf_to_jsonld",
]
