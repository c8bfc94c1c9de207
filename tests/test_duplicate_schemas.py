import pytest

from schemadoc.core.schema.duplicates import (
    DUPLICATE_POLICIES,
    DuplicateSchemaNameError,
    fail_on_duplicate_schema,
    handle_duplicate_schemas,
    ignore_duplicate_schemas,
)
from schemadoc.core.schema.models import schema


A1 = schema("A", {"x": int})
A2 = schema("A", {"x": str})
B = schema("B", {"y": int})


def test_ignore_keeps_first_instance():
    out = handle_duplicate_schemas(ignore_duplicate_schemas, {"A": [A1, A2], "B": [B]})
    assert out == {"A": A1, "B": B}
    assert out["A"].fields == A1.fields


def test_fail_passes_single_instances_through():
    out = handle_duplicate_schemas(fail_on_duplicate_schema, {"A": [A1], "B": [B]})
    assert list(out) == ["A", "B"]


def test_fail_raises_on_conflicting_instances():
    with pytest.raises(DuplicateSchemaNameError) as exc_info:
        handle_duplicate_schemas(fail_on_duplicate_schema, {"B": [B], "A": [A1, A2]})

    err = exc_info.value
    assert err.schema_name == "A"
    assert err.values == [A1, A2]
    assert "(A)" in str(err)
    assert isinstance(err, ValueError)


def test_custom_policy_is_used_per_name():
    def last_wins(name, values):
        return name, values[-1]

    out = handle_duplicate_schemas(last_wins, {"A": [A1, A2]})
    assert out["A"].fields == A2.fields


def test_policies_by_name():
    assert DUPLICATE_POLICIES["ignore"] is ignore_duplicate_schemas
    assert DUPLICATE_POLICIES["fail"] is fail_on_duplicate_schema
