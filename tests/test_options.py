from __future__ import annotations

import pytest

from be2bill import FragmentedAmount, SingleAmount, flatten
from be2bill.core.options import encode_request, iter_leaves, merge_options, stringify


def test_flatten_flat_map_is_unchanged():
    options = {"z": "test", "m": "vale", "a": "echo"}
    assert flatten(options) == options


def test_flatten_stringifies_scalars():
    assert flatten({"a": 3, "b": True, "c": SingleAmount(2510)}) == {
        "a": "3",
        "b": "true",
        "c": "2510",
    }


def test_flatten_nested_map():
    options = {"a": "echo", "p": {"z": "subopt1", "y": "subopt2"}}
    assert flatten(options) == {"a": "echo", "p[z]": "subopt1", "p[y]": "subopt2"}


def test_flatten_two_levels():
    options = {
        "a": "echo",
        "p": {
            "z": "subopt1",
            "x": {"2015-09-12": "3000", "2015-10-12": "1000", "2015-11-12": "1500"},
            "y": "subopt2",
        },
    }
    assert flatten(options) == {
        "a": "echo",
        "p[z]": "subopt1",
        "p[x][2015-09-12]": "3000",
        "p[x][2015-10-12]": "1000",
        "p[x][2015-11-12]": "1500",
        "p[y]": "subopt2",
    }


def test_flatten_fragmented_amount():
    amount = FragmentedAmount({"2010-11-21": 1120, "2010-10-21": 2100})
    assert flatten({"AMOUNTS": amount}) == {
        "AMOUNTS[2010-10-21]": "2100",
        "AMOUNTS[2010-11-21]": "1120",
    }


def test_leaves_keep_nested_entries_under_their_parent():
    # "[" sorts after "X": a plain sort of flat keys would put AMOUNTSX first
    leaves = list(iter_leaves({"AMOUNTSX": "1", "AMOUNTS": {"b": 2, "a": 1}}))
    assert leaves == [("AMOUNTS[a]", "1"), ("AMOUNTS[b]", "2"), ("AMOUNTSX", "1")]


@pytest.mark.parametrize("value", [1.5, None, ["a"], object()])
def test_stringify_rejects_unsupported_values(value):
    with pytest.raises(TypeError):
        stringify(value)


def test_encode_request_wraps_params():
    body = encode_request(
        {"OPERATIONTYPE": "payment", "AMOUNTS": {"2015-01-01": 50}, "ORDERID": "42"}
    )
    assert body == {
        "method": "payment",
        "params[AMOUNTS][2015-01-01]": "50",
        "params[OPERATIONTYPE]": "payment",
        "params[ORDERID]": "42",
    }


def test_merge_options_copies():
    original = {"a": "1"}
    merged = merge_options(original)
    merged["b"] = "2"
    assert original == {"a": "1"}
    assert merge_options(None) == {}
