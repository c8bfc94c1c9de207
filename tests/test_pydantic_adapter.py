from typing import Dict, List, Optional, Set

import pytest
from pydantic import BaseModel, Field

from schemadoc.core.schema.collect import collect_models
from schemadoc.core.schema.models import AnyKey, InvalidSchemaError, OptionalKey, RequiredKey, Schema, SchemaRef
from schemadoc.core.schema.pydantic_adapter import from_pydantic


class Address(BaseModel):
    street: str
    city: Optional[str] = None


class Customer(BaseModel):
    name: str
    address: Address
    tags: List[str] = Field(default_factory=list)
    labels: Set[str] = Field(default_factory=set)
    scores: Dict[str, int] = Field(default_factory=dict)
    email: str = Field(alias="emailAddress")


class Node(BaseModel):
    value: int
    children: List["Node"] = Field(default_factory=list)


Node.model_rebuild()


def test_model_becomes_named_schema():
    s = from_pydantic(Customer)

    assert s.name == "Customer"
    assert s.fields[RequiredKey("name")] is str
    assert s.fields[OptionalKey("tags")] == [str]
    assert s.fields[OptionalKey("labels")] == {str}
    assert s.fields[OptionalKey("scores")] == Schema({AnyKey(str): int})
    assert s.fields[RequiredKey("emailAddress")] is str


def test_nested_models_are_named_schemas():
    address = from_pydantic(Customer).fields[RequiredKey("address")]

    assert address.name == "Address"
    assert address.fields == {RequiredKey("street"): str, OptionalKey("city"): str}
    assert list(collect_models(from_pydantic(Customer))) == ["Customer", "Address"]


def test_recursive_models_use_references():
    node = from_pydantic(Node)
    ref = node.fields[OptionalKey("children")][0]

    assert isinstance(ref, SchemaRef)
    assert ref.name == "Node"
    assert ref.deref() is node
    assert collect_models(node) == {"Node": [node]}


def test_rejects_non_models():
    with pytest.raises(InvalidSchemaError):
        from_pydantic(dict)
