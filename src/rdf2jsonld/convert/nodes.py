"""Node serialization - accumulated state to JSON-LD node objects."""

__all__ = ["NodeBuilder", "serialize_nodes"]

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from rdf2jsonld.rdf.namespaces import TYPE_KEY


class NodeBuilder:
    """Builds one node object from an ordered list of fields."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        self.fields: List[Tuple[str, Any]] = []

    def set_types(self, types: Sequence[Any]) -> "NodeBuilder":
        """Set ``@type``: a bare value when there is exactly one, else an array."""
        if len(types) == 1:
            self.fields.append((TYPE_KEY, types[0]))
        else:
            self.fields.append((TYPE_KEY, list(types)))
        return self

    def set_values(self, predicate: str, values: Sequence[Any]) -> "NodeBuilder":
        """Set a predicate field. Always an array, even for one value."""
        self.fields.append((predicate, list(values)))
        return self

    def build(self) -> Dict[str, Any]:
        node: Dict[str, Any] = {"@id": self.node_id}
        node.update(self.fields)
        return node


def serialize_nodes(state: Mapping[str, Mapping[str, Sequence[Any]]]) -> List[Dict[str, Any]]:
    """
    Convert accumulated state into a list of node objects.

    Args:
        state: Subject key -> predicate key -> collected values

    Returns:
        One node object per subject, in the state's iteration order

    Example:
        >>> serialize_nodes({"ex:Bob": {"@type": ["ex:Person"]}})
        [{'@id': 'ex:Bob', '@type': 'ex:Person'}]
    """
    document = []
    for subject, predicates in state.items():
        builder = NodeBuilder(subject)
        for predicate, values in predicates.items():
            if predicate == TYPE_KEY:
                builder.set_types(values)
            else:
                builder.set_values(predicate, values)
        document.append(builder.build())
    return document
