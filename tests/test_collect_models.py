from schemadoc.core.schema.collect import ModelRegistry, collect_models
from schemadoc.core.schema.models import SchemaRef, schema


NODE = schema("Node", {"value": int, "children": [SchemaRef("Node", lambda: NODE)]})


def test_collects_named_schemas_at_any_depth():
    address = schema("Address", {"street": str})
    user = schema("User", {"address": address})
    order = schema("Order", {"items": [schema("Item", {"sku": str})]})

    route_table = {
        "routes": [
            {"uri": "/users", "responses": {200: [user]}},
            {"uri": "/orders", "body": {"wrapped": (order,)}},
        ]
    }

    models = collect_models(route_table)
    assert list(models) == ["User", "Address", "Order", "Item"]


def test_equal_instances_are_kept_once():
    models = collect_models([schema("A", {"x": int}), schema("A", {"x": int})])
    assert len(models["A"]) == 1


def test_distinct_instances_are_kept_in_first_seen_order():
    first = schema("A", {"x": int})
    second = schema("A", {"x": str})

    models = collect_models([first, {"nested": second}, first])
    assert models["A"] == [first, second]


def test_anonymous_schemas_and_scalars_are_not_collected():
    assert collect_models(schema({"a": int})) == {}
    assert collect_models([1, "a", None, {"k": 2.5}]) == {}


def test_named_schema_below_anonymous_one_is_collected():
    inner = schema("Inner", {"v": int})
    models = collect_models(schema({"wrapper": {"inner": inner}}))
    assert models == {"Inner": [inner]}


def test_references_are_dereferenced_and_recursion_terminates():
    assert collect_models(NODE) == {"Node": [NODE]}
    assert collect_models(SchemaRef("Node", lambda: NODE)) == {"Node": [NODE]}


def test_each_call_starts_with_a_fresh_registry():
    collect_models(schema("A", {"x": int}))
    assert collect_models(schema("B", {"x": int})) == {"B": [schema("B", {"x": int})]}


def test_model_registry_set_semantics():
    reg = ModelRegistry()
    a = schema("A", {"x": int})

    assert reg.add(a) is True
    assert reg.add(schema("A", {"x": int})) is False
    assert a in reg
    assert schema("B", {"x": int}) not in reg
    assert len(reg) == 1
    assert reg.as_dict() == {"A": [a]}
