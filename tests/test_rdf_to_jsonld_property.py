from collections import defaultdict

from hypothesis import given, strategies as st
from rdflib import BNode, Literal, URIRef

from rdf2jsonld import rdf_to_jsonld
from rdf2jsonld.convert.terms import object_value, subject_key
from rdf2jsonld.rdf.namespaces import RDF_TYPE

EX = "http://example.org/"

names = st.sampled_from(["a", "b", "c", "d"])
named = names.map(lambda n: URIRef(EX + n))
blank = names.map(BNode)
literals = st.one_of(
    st.text(max_size=5).map(Literal),
    st.tuples(st.text(max_size=5), st.sampled_from(["en", "de", "fr"])).map(
        lambda t: Literal(t[0], lang=t[1])
    ),
)
subjects = st.one_of(named, blank)
predicates = st.one_of(st.just(RDF_TYPE), names.map(lambda n: URIRef(EX + "p/" + n)))


@st.composite
def triples(draw):
    s = draw(subjects)
    p = draw(predicates)
    # rdf:type objects are nodes
    o = draw(st.one_of(named, blank)) if p == RDF_TYPE else draw(st.one_of(named, blank, literals))
    return (s, p, o)


@given(st.lists(triples(), max_size=30))
def test_one_node_per_subject(data):
    document = rdf_to_jsonld(data)
    ids = [node["@id"] for node in document]
    assert len(ids) == len(set(ids))
    assert set(ids) == {subject_key(s) for s, _, _ in data}


@given(st.lists(triples(), max_size=30))
def test_collapsing_rules(data):
    type_counts = defaultdict(int)
    for s, p, _ in data:
        if p == RDF_TYPE:
            type_counts[subject_key(s)] += 1

    for node in rdf_to_jsonld(data):
        count = type_counts[node["@id"]]
        if count == 0:
            assert "@type" not in node
        elif count == 1:
            assert isinstance(node["@type"], str)
        else:
            assert isinstance(node["@type"], list)
            assert len(node["@type"]) == count
        for key, value in node.items():
            if key not in ("@id", "@type"):
                assert isinstance(value, list)


@given(st.lists(triples(), max_size=30))
def test_values_keep_input_order(data):
    expected = defaultdict(list)
    for s, p, o in data:
        if p != RDF_TYPE:
            expected[(subject_key(s), str(p))].append(object_value(o))

    for node in rdf_to_jsonld(data):
        for key, value in node.items():
            if key not in ("@id", "@type"):
                assert value == expected[(node["@id"], key)]
