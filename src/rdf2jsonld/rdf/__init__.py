"""
RDF utilities subpackage - requires rdflib.

Namespace constants shared by the converter and the triple sources.
"""

from rdf2jsonld.rdf.namespaces import (
    RDF_NS,
    XSD_NS,
    RDF_TYPE,
    XSD_STRING,
    TYPE_KEY,
    COMMON_NAMESPACES,
)

__all__ = [
    "RDF_NS",
    "XSD_NS",
    "RDF_TYPE",
    "XSD_STRING",
    "TYPE_KEY",
    "COMMON_NAMESPACES",
]
