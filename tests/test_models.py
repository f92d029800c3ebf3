"""Tests for the operation catalog and the request records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from query_engine import (
    FilterCriteria,
    FilterGroup,
    FilterOperation,
    SpecificationRequest,
)
from query_engine.operations import (
    DATE_OPERATIONS,
    MULTI_VALUE_OPERATIONS,
    NULL_OPERATIONS,
    SINGLE_VALUE_OPERATIONS,
)

# -- Operation catalog -------------------------------------------------------


def test_catalog_has_twenty_operations():
    assert len(FilterOperation) == 20


def test_operation_lookup_by_value_and_name():
    assert FilterOperation("not_equals") is FilterOperation.NOT_EQUALS
    assert FilterOperation("NOT_EQUALS") is FilterOperation.NOT_EQUALS
    assert FilterOperation("Date_Between") is FilterOperation.DATE_BETWEEN


def test_unknown_operation_raises():
    with pytest.raises(ValueError):
        FilterOperation("approximately")


def test_operation_groups_partition_the_catalog():
    assert MULTI_VALUE_OPERATIONS == {
        FilterOperation.IN,
        FilterOperation.NOT_IN,
        FilterOperation.BETWEEN,
        FilterOperation.DATE_BETWEEN,
    }
    assert NULL_OPERATIONS == {FilterOperation.IS_NULL, FilterOperation.IS_NOT_NULL}
    assert (
        MULTI_VALUE_OPERATIONS | NULL_OPERATIONS | SINGLE_VALUE_OPERATIONS
        == set(FilterOperation)
    )
    assert not MULTI_VALUE_OPERATIONS & SINGLE_VALUE_OPERATIONS
    assert DATE_OPERATIONS <= set(FilterOperation)


# -- FilterCriteria ----------------------------------------------------------


def test_criteria_defaults():
    criteria = FilterCriteria(field="status")
    assert criteria.operation is None
    assert criteria.value is None
    assert criteria.values is None
    assert criteria.case_sensitive is False
    assert criteria.negate is False
    assert criteria.value_type is None


def test_criteria_accepts_camel_case_payload():
    criteria = FilterCriteria.model_validate(
        {
            "field": "first_name",
            "operation": "starts_with",
            "value": "Jo",
            "caseSensitive": True,
            "valueType": "str",
        }
    )
    assert criteria.operation is FilterOperation.STARTS_WITH
    assert criteria.case_sensitive is True
    assert criteria.value_type == "str"


def test_criteria_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        FilterCriteria.model_validate({"field": "status", "colour": "blue"})


def test_criteria_is_mutable_with_validation():
    criteria = FilterCriteria(field="status", operation=FilterOperation.EQUALS)
    criteria.negate = True
    assert criteria.negate is True
    with pytest.raises(ValidationError):
        criteria.operation = "approximately"  # type: ignore[assignment]


# -- FilterGroup / SpecificationRequest --------------------------------------


def test_group_defaults_to_and():
    group = FilterGroup()
    assert group.filters == []
    assert group.use_and_operator is True


def test_group_add_filter_preserves_order():
    first = FilterCriteria(field="a", operation=FilterOperation.EQUALS, value=1)
    second = FilterCriteria(field="b", operation=FilterOperation.EQUALS, value=2)
    group = FilterGroup().add_filter(first).add_filter(second)
    assert [f.field for f in group.filters] == ["a", "b"]


def test_request_defaults():
    request = SpecificationRequest()
    assert request.filters == []
    assert request.filter_groups == []
    assert request.use_and_operator is True
    assert request.use_and_operator_for_groups is True
    assert request.is_empty


def test_request_defaults_are_not_shared():
    one = SpecificationRequest()
    two = SpecificationRequest()
    one.add_filter(FilterCriteria(field="status"))
    assert two.filters == []


def test_request_helpers_append_in_order():
    request = (
        SpecificationRequest()
        .add_filter(FilterCriteria(field="a"))
        .add_filters([FilterCriteria(field="b"), FilterCriteria(field="c")])
        .add_filter_group(FilterGroup(filters=[FilterCriteria(field="d")]))
    )
    assert [f.field for f in request.filters] == ["a", "b", "c"]
    assert len(request.filter_groups) == 1
    assert not request.is_empty


def test_helpers_validate_raw_mappings():
    request = (
        SpecificationRequest()
        .add_filter({"field": "age", "operation": "greater_than", "value": 18})
        .add_filters([{"field": "status", "operation": "EQUALS", "value": "A"}])
        .add_filter_group({"filters": [{"field": "d"}], "useAndOperator": False})
    )

    assert all(isinstance(f, FilterCriteria) for f in request.filters)
    assert request.filters[0].operation is FilterOperation.GREATER_THAN
    assert request.filters[1].operation is FilterOperation.EQUALS
    group = request.filter_groups[0]
    assert isinstance(group, FilterGroup)
    assert group.use_and_operator is False

    nested = FilterGroup().add_filter({"field": "x", "negate": True})
    assert nested.filters[0].negate is True


@pytest.mark.parametrize(
    "add",
    [
        lambda r: r.add_filter({"field": "a", "operation": "approximately"}),
        lambda r: r.add_filter({"operation": "equals"}),
        lambda r: r.add_filters([{"field": "a", "unknown": 1}]),
        lambda r: r.add_filter_group({"filters": "status"}),
        lambda r: r.add_filter(42),
    ],
)
def test_helpers_reject_invalid_records(add):
    request = SpecificationRequest()
    with pytest.raises(ValidationError):
        add(request)
    assert request.is_empty


def test_request_from_camel_case_json():
    request = SpecificationRequest.model_validate_json(
        """
        {
            "filters": [{"field": "status", "operation": "equals", "value": "ACTIVE"}],
            "useAndOperator": false,
            "filterGroups": [
                {
                    "filters": [
                        {"field": "age", "operation": "greater_than", "value": 18}
                    ],
                    "useAndOperator": false
                }
            ],
            "useAndOperatorForGroups": false
        }
        """
    )
    assert request.use_and_operator is False
    assert request.use_and_operator_for_groups is False
    assert request.filter_groups[0].use_and_operator is False
    assert request.filter_groups[0].filters[0].operation is FilterOperation.GREATER_THAN


def test_request_dumps_by_alias():
    request = SpecificationRequest(
        filters=[
            FilterCriteria(
                field="status", operation=FilterOperation.EQUALS, value="X"
            )
        ]
    )
    data = request.model_dump(by_alias=True)
    assert data["useAndOperatorForGroups"] is True
    assert data["filters"][0]["caseSensitive"] is False
