"""Size metric for leaf declarations.

The metric adds name lengths (characters) to signature and body lengths
(bytes). It is a proxy for how much a declaration costs in the module,
not a physical byte count.
"""

from typing import Union

from ..metadata.models import FieldDefinition, MethodDefinition, PropertyDefinition

LeafDefinition = Union[FieldDefinition, MethodDefinition, PropertyDefinition]


def field_size(field: FieldDefinition) -> int:
    return len(field.name) + field.signature_length


def property_size(prop: PropertyDefinition) -> int:
    return len(prop.name) + prop.signature_length


def method_size(method: MethodDefinition) -> int:
    """Name + signature + every parameter name + body length (0 without a body)."""
    size = len(method.name) + method.signature_length
    size += sum(len(name) for name in method.parameter_names)
    if method.body_length is not None:
        size += method.body_length
    return size


def leaf_size(definition: LeafDefinition) -> int:
    if isinstance(definition, MethodDefinition):
        return method_size(definition)
    if isinstance(definition, PropertyDefinition):
        return property_size(definition)
    return field_size(definition)
