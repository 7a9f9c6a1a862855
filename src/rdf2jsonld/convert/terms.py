"""
Term classification - requires rdflib.

Pure functions mapping rdflib terms to JSON-LD keys and fragments.
Only named nodes (URIRef), blank nodes (BNode) and literals (Literal)
are supported; callers check support before classifying.
"""

__all__ = [
    "is_supported_subject",
    "is_supported_object",
    "subject_key",
    "predicate_key",
    "object_value",
    "node_id",
]

from typing import Any, Dict

from rdflib import BNode, Literal, URIRef

from rdf2jsonld.rdf.namespaces import XSD_STRING

BLANK_PREFIX = "_:"


def is_supported_subject(term: Any) -> bool:
    """Check if term is a named node or a blank node."""
    return isinstance(term, (URIRef, BNode))


def is_supported_object(term: Any) -> bool:
    """Check if term is a named node, a blank node or a literal."""
    return isinstance(term, (URIRef, BNode, Literal))


def node_id(term: URIRef | BNode) -> str:
    """
    Return the JSON-LD identifier of a node.

    Example:
        >>> node_id(URIRef("http://example.org/Alice"))
        'http://example.org/Alice'
        >>> node_id(BNode("b0"))
        '_:b0'
    """
    if isinstance(term, BNode):
        return BLANK_PREFIX + str(term)
    return str(term)


def subject_key(term: URIRef | BNode) -> str:
    """Return the grouping key of a subject term."""
    return node_id(term)


def predicate_key(term: URIRef) -> str:
    """Return the grouping key of a predicate term (its IRI)."""
    return str(term)


def object_value(term: URIRef | BNode | Literal) -> Dict[str, str]:
    """
    Convert an object term into its JSON-LD value fragment.

    Args:
        term: Named node, blank node or literal

    Returns:
        ``{"@id": ...}`` for nodes, ``{"@value": ..., "@language": ...}``
        for language-tagged literals, ``{"@value": ..., "@type": ...}``
        for every other literal

    Example:
        >>> object_value(Literal("Alice", lang="en"))
        {'@value': 'Alice', '@language': 'en'}
        >>> object_value(Literal("Alice"))
        {'@value': 'Alice', '@type': 'http://www.w3.org/2001/XMLSchema#string'}
    """
    if not isinstance(term, Literal):
        return {"@id": node_id(term)}

    if term.language:
        return {"@value": str(term), "@language": term.language}

    # Simple literals are xsd:string
    datatype = term.datatype if term.datatype is not None else XSD_STRING
    return {"@value": str(term), "@type": str(datatype)}
