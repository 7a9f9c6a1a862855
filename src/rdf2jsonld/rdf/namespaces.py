"""
Common RDF namespace definitions.

Pre-defined namespaces and the IRIs the converter treats specially.
"""

__all__ = [
    "RDF_NS",
    "XSD_NS",
    "RDF_TYPE",
    "XSD_STRING",
    "TYPE_KEY",
    "COMMON_NAMESPACES",
]

from rdflib import URIRef

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"

RDF_TYPE = URIRef(RDF_NS + "type")
XSD_STRING = URIRef(XSD_NS + "string")

# Reserved grouping key for rdf:type values
TYPE_KEY = "@type"

COMMON_NAMESPACES = {
    "rdf": RDF_NS,
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "xsd": XSD_NS,
    "schema": "http://schema.org/",
    "dcterms": "http://purl.org/dc/terms/",
    "prov": "http://www.w3.org/ns/prov#",
    "skos": "http://www.w3.org/2004/02/skos/core#",
}
