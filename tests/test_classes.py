"""
Tests for class merging helpers.
"""

from chuk_variants.classes import (
    create_class,
    dedupe_classes,
    join_classes,
    preserve_class,
)
from chuk_variants.variants import resolve


class TestJoinClasses:
    """Tests for join_classes."""

    def test_strings(self):
        assert join_classes("flex", "p-4") == "flex p-4"

    def test_falsy_values_dropped(self):
        """None, False, empty strings and zero are skipped."""
        assert join_classes("a", None, False, "", 0, "b") == "a b"

    def test_true_dropped(self):
        """A bare True is not a class."""
        assert join_classes(True, "a") == "a"

    def test_numbers(self):
        assert join_classes("z", 10) == "z 10"

    def test_nested_sequences(self):
        """Lists and tuples are flattened recursively."""
        assert join_classes(["a", ("b", ["c", None])], "d") == "a b c d"

    def test_conditional_mapping(self):
        """Mapping keys are kept when their condition is truthy."""
        assert join_classes({"active": True, "hidden": False, "muted": 1}) == "active muted"


class TestDedupeClasses:
    """Tests for the default merge."""

    def test_keeps_last_occurrence(self):
        assert dedupe_classes("a b a c") == "b a c"

    def test_collapses_whitespace(self):
        assert dedupe_classes("  a   b ") == "a b"


class TestCreateClass:
    """Tests for create_class."""

    def test_merges_regular_inputs(self):
        """Regular inputs go through the merge function."""
        assert create_class("flex p-4", "p-4 m-2") == "flex p-4 m-2"

    def test_preserved_classes_appended(self):
        """Preserved groups bypass the merge and come last."""
        result = create_class("flex", preserve_class("flex custom-fade"), "bg-red")
        assert result == "flex bg-red flex custom-fade"

    def test_preserved_conditionals(self):
        """Conditionals still apply inside preserved values."""
        loading = False
        result = create_class("flex", preserve_class(["animate-spin", loading and "opacity-50"]))
        assert result == "flex animate-spin"

    def test_empty_groups_dropped(self):
        """Empty results do not leave stray spaces."""
        assert create_class(None, preserve_class(None)) == ""
        assert create_class(preserve_class("x")) == "x"

    def test_custom_merge(self):
        """Any callable can resolve conflicts."""

        def last_bg_wins(classes: str) -> str:
            tokens = classes.split()
            backgrounds = [t for t in tokens if t.startswith("bg-")]
            return " ".join(t for t in tokens if not t.startswith("bg-") or t == backgrounds[-1])

        assert create_class("bg-red p-4", "bg-blue", merge=last_bg_wins) == "p-4 bg-blue"

    def test_with_resolved_variants(self):
        """Resolved classes combine with caller classes."""
        spec = {"base": "btn", "size": {"sm": "text-sm", "_default": "sm"}}
        result = resolve(spec, {})
        assert create_class(result.classes, "mt-2", preserve_class("js-hook")) == (
            "btn text-sm mt-2 js-hook"
        )
