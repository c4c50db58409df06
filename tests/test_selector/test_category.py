"""Tests for the PartCategory table."""

import pytest

from selectorkit.selector import PartCategory


class TestRanks:
    def test_ranks_follow_syntax_order(self):
        ranks = [category.rank for category in PartCategory]
        assert ranks == [1, 2, 3, 4, 5, 6]

    def test_once_only_categories(self):
        once = {category for category in PartCategory if category.once}
        assert once == {PartCategory.ELEMENT, PartCategory.ID, PartCategory.PSEUDO_ELEMENT}


class TestRender:
    @pytest.mark.parametrize(
        "category, expected",
        [
            (PartCategory.ELEMENT, "div"),
            (PartCategory.ID, "#div"),
            (PartCategory.CLASS, ".div"),
            (PartCategory.ATTRIBUTE, "[div]"),
            (PartCategory.PSEUDO_CLASS, ":div"),
            (PartCategory.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_render(self, category: PartCategory, expected: str) -> None:
        assert category.render("div") == expected

    def test_label(self):
        assert PartCategory.PSEUDO_CLASS.label == "pseudo-class"
        assert PartCategory.ID.label == "id"
