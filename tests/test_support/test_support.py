"""Tests for the NativeScript property support table."""

import pytest

from ns_tailwind.support import (
    SUPPORTED_PROPERTIES,
    Always,
    OneOf,
    is_bookkeeping_variable,
    is_supported,
)


# ---------------------------------------------------------------------------
# Table shape
# ---------------------------------------------------------------------------


class TestSupportTable:
    def test_always_entry(self):
        assert SUPPORTED_PROPERTIES["color"] == Always()

    def test_enumerated_entry(self):
        assert SUPPORTED_PROPERTIES["visibility"] == OneOf("visible", "collapse")
        assert SUPPORTED_PROPERTIES["visibility"].values == frozenset({"visible", "collapse"})

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SUPPORTED_PROPERTIES["float"] = Always()  # type: ignore[index]


# ---------------------------------------------------------------------------
# is_supported
# ---------------------------------------------------------------------------


class TestIsSupported:
    @pytest.mark.parametrize(
        "prop,value",
        [
            ("color", "red"),
            ("margin", "0 16"),
            ("text-align", "center"),
            ("visibility", "collapse"),
            ("placeholder-color", "gray"),
            ("animation-duration", "1s"),
        ],
    )
    def test_supported(self, prop, value):
        assert is_supported(prop, value)

    @pytest.mark.parametrize(
        "prop,value",
        [
            ("float", "left"),
            ("display", "flex"),
            ("text-align", "justify"),
            ("visibility", "hidden"),
            ("vertical-align", "middle"),
            ("width", "100vw"),
            ("height", "100vh"),
            ("width", "max-content"),
            ("min-height", "min-content"),
        ],
    )
    def test_unsupported(self, prop, value):
        assert not is_supported(prop, value)

    def test_property_only(self):
        assert is_supported("visibility")
        assert not is_supported("cursor")


# ---------------------------------------------------------------------------
# Bookkeeping variables
# ---------------------------------------------------------------------------


class TestBookkeepingVariables:
    @pytest.mark.parametrize(
        "prop",
        [
            "--tw-ring-offset-width",
            "--tw-ring-inset",
            "--tw-shadow-color",
            "--tw-ordinal",
            "--tw-slashed-zero",
            "--tw-numeric-figure",
            "--tw-space-x-reverse",
            "--tw-divide-y-reverse",
        ],
    )
    def test_dropped(self, prop):
        assert is_bookkeeping_variable(prop)

    @pytest.mark.parametrize("prop", ["--tw-translate-x", "--spacing", "--color-red-500", "color"])
    def test_not_bookkeeping(self, prop):
        assert not is_bookkeeping_variable(prop)
