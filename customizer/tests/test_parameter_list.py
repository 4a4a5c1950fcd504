"""Tests for the parameter list model."""

import math

import pytest
from customizer.src.models.parameter import (
    BoolValue,
    NumberValue,
    ParameterDefinition,
    ParameterType,
    StringValue,
    coerce_value,
)
from customizer.src.services.parameter_list import ParameterList

def test_seed_parameter():
    params = ParameterList()
    assert len(params) == 1
    seed = params.get(0)
    assert seed.name == "nodeVersion"
    assert seed.type == ParameterType.STRING
    assert seed.default == StringValue(value="20.x")
    assert seed.is_fixed_name is True

def test_add_uses_next_id():
    params = ParameterList()
    param = params.add()
    assert param.id == 1
    assert param.name == "param1"
    assert param.type == ParameterType.STRING
    assert param.default == StringValue(value="")
    assert param.is_fixed_name is False
    assert [p.id for p in params] == [0, 1]

def test_add_after_removing_everything_starts_at_one():
    params = ParameterList()
    params.add()
    params.remove(0)
    params.remove(1)
    assert len(params) == 0
    assert params.add().id == 1

def test_add_after_gap_uses_max_plus_one():
    params = ParameterList(())
    params.add()
    params.add()
    params.add()
    params.remove(2)
    assert [p.id for p in params] == [1, 3]
    assert params.add().id == 4

def test_fixed_name_and_type_are_locked():
    params = ParameterList()
    assert params.update(0, "name", "somethingElse") is None
    assert params.update(0, "type", "number") is None
    seed = params.get(0)
    assert seed.name == "nodeVersion"
    assert seed.type == ParameterType.STRING

def test_fixed_default_is_editable():
    params = ParameterList()
    updated = params.update(0, "default", "18.x")
    assert updated.default == StringValue(value="18.x")
    assert params.get(0).default.value == "18.x"

def test_update_name():
    params = ParameterList()
    params.add()
    params.update(1, "name", "environment")
    assert params.get(1).name == "environment"

def test_boolean_default_coercion():
    params = ParameterList(())
    params.add()
    params.update(1, "type", "boolean")
    params.update(1, "default", "true")
    assert params.get(1).default == BoolValue(value=True)
    params.update(1, "default", "True")
    assert params.get(1).default == BoolValue(value=False)
    params.update(1, "default", "yes")
    assert params.get(1).default == BoolValue(value=False)

def test_number_default_coercion():
    params = ParameterList(())
    params.add()
    params.update(1, "type", "number")
    params.update(1, "default", "3")
    assert params.get(1).default == NumberValue(value=3)
    params.update(1, "default", " 2.5 ")
    assert params.get(1).default.value == 2.5
    params.update(1, "default", "0x10")
    assert params.get(1).default.value == 16

def test_unparseable_number_is_stored_as_nan():
    params = ParameterList(())
    params.add()
    params.update(1, "type", "number")
    updated = params.update(1, "default", "abc")
    assert updated is not None
    assert math.isnan(params.get(1).default.value)
    assert params.get(1).default.as_text() == "NaN"

def test_type_change_recoerces_default():
    params = ParameterList(())
    params.add()
    params.update(1, "default", "42")
    params.update(1, "type", "number")
    assert params.get(1).default == NumberValue(value=42)
    params.update(1, "type", "boolean")
    assert params.get(1).default == BoolValue(value=False)
    params.update(1, "type", "string")
    assert params.get(1).default == StringValue(value="false")

def test_invalid_type_is_ignored():
    params = ParameterList(())
    params.add()
    assert params.update(1, "type", "object") is None
    assert params.get(1).type == ParameterType.STRING

def test_unknown_field_is_ignored():
    params = ParameterList(())
    params.add()
    before = params.snapshot()
    assert params.update(1, "isFixedName", "true") is None
    assert params.snapshot() == before

def test_unknown_id_is_noop():
    params = ParameterList()
    before = params.snapshot()
    assert params.update(99, "name", "x") is None
    assert params.remove(99) is False
    assert params.snapshot() == before

def test_update_preserves_order_and_other_entries():
    params = ParameterList()
    params.add()
    params.add()
    snapshot = params.snapshot()
    params.update(1, "default", "changed")
    assert [p.id for p in params] == [0, 1, 2]
    assert params.get(0) is snapshot[0]
    assert params.get(2) is snapshot[2]
    # Old snapshot is untouched
    assert snapshot[1].default.value == ""

def test_definition_rejects_mismatched_default():
    with pytest.raises(ValueError, match="expected number"):
        ParameterDefinition(
            id=1,
            name="count",
            type=ParameterType.NUMBER,
            default=StringValue(value="3"),
        )

def test_number_text_form():
    assert coerce_value(ParameterType.NUMBER, "3").as_text() == "3"
    assert coerce_value(ParameterType.NUMBER, "-2.50").as_text() == "-2.5"
    assert coerce_value(ParameterType.NUMBER, "0.000001").as_text() == "0.000001"
    assert coerce_value(ParameterType.NUMBER, "-0").as_text() == "0"

def test_small_number_uses_short_exponent():
    assert coerce_value(ParameterType.NUMBER, "1e-7").as_text() == "1e-7"
    assert coerce_value(ParameterType.NUMBER, "1.5e-10").as_text() == "1.5e-10"

def test_large_number_keeps_shortest_digits():
    assert coerce_value(ParameterType.NUMBER, "123456789012345680000").as_text() == "123456789012345680000"
    assert coerce_value(ParameterType.NUMBER, "1e21").as_text() == "1e+21"
