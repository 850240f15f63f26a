from __future__ import annotations

import pytest

from scaffolder.naming import (
    NamingPattern,
    apply_pattern,
    to_camel_case,
    to_kebab_case,
    to_lower_case,
    to_pascal_case,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("user_profile", "UserProfile"),
        ("user-profile", "UserProfile"),
        ("userProfile", "UserProfile"),
        ("UserProfile", "UserProfile"),
        ("user  profile", "UserProfile"),
        ("__user--profile__", "UserProfile"),
        ("ORDER", "ORDER"),
        ("order2go", "Order2go"),
        ("", ""),
        ("-_ -", ""),
    ],
)
def test_to_pascal_case(value, expected):
    assert to_pascal_case(value) == expected


@pytest.mark.parametrize(
    "value",
    ["user_profile", "userProfile", "HTTPServer", "a-b_c d", "", "x", "Order total-v2", "և", "ᾀ", "ǆ_word"],
)
def test_to_pascal_case_is_idempotent(value):
    once = to_pascal_case(value)
    assert to_pascal_case(once) == once


@pytest.mark.parametrize(
    "value, expected",
    [
        ("UserProfile", "user-profile"),
        ("userProfile", "user-profile"),
        ("already-kebab", "already-kebab"),
        ("user_profile", "user_profile"),
        ("", ""),
    ],
)
def test_to_kebab_case(value, expected):
    assert to_kebab_case(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("UserProfile", "userProfile"),
        ("user_profile", "user_profile"),
        ("X", "x"),
        ("", ""),
    ],
)
def test_to_camel_case_only_touches_first_character(value, expected):
    assert to_camel_case(value) == expected


def test_to_lower_case():
    assert to_lower_case("User_Profile-1") == "user_profile-1"


@pytest.mark.parametrize(
    "pattern, expected",
    [
        (NamingPattern.LOWER_CASE, "ordertotal"),
        (NamingPattern.KEBAB_CASE, "order-total"),
        (NamingPattern.PASCAL_CASE, "OrderTotal"),
        ("camelCase", "orderTotal"),
    ],
)
def test_apply_pattern(pattern, expected):
    assert apply_pattern("OrderTotal", pattern) == expected


def test_apply_pattern_rejects_unknown_pattern():
    with pytest.raises(ValueError):
        apply_pattern("OrderTotal", "snake_case")
