"""Tests for the document parser."""

from __future__ import annotations

import pytest

from cooknote.models import (
    Cookware,
    Ingredient,
    NumericQuantity,
    Recipe,
    ShoppingItem,
    Text,
    TextQuantity,
    Timer,
)
from cooknote.parser import ParserState, RecipeParser, parse


class TestParseMetadata:
    """Tests for metadata extraction."""

    def test_metadata(self):
        recipe = parse(">> servings: 2\n>> course: dinner")
        assert recipe.metadata == {"servings": "2", "course": "dinner"}
        assert recipe.steps == []

    def test_duplicate_key_last_wins(self):
        recipe = parse(">> servings: 2\nMix.\n>> servings: 4")
        assert recipe.metadata == {"servings": "4"}

    def test_metadata_values_stay_strings(self):
        recipe = parse(">> total time: 1 hour 30 minutes")
        assert recipe.metadata["total time"] == "1 hour 30 minutes"


class TestParseSteps:
    """Tests for step paragraphs."""

    def test_single_step(self):
        recipe = parse("Mash @banana.")
        assert recipe.steps == [[Text("Mash "), Ingredient(name="banana"), Text(".")]]

    def test_blank_lines_separate_steps(self):
        recipe = parse("Step one.\n\nStep two.\n\n\nStep three.")
        assert recipe.steps == [[Text("Step one.")], [Text("Step two.")], [Text("Step three.")]]

    def test_consecutive_lines_form_one_step(self):
        recipe = parse("Put @potato{2} in a pot\nand boil for ~{20%minutes}.")
        assert recipe.steps == [
            [
                Text("Put "),
                Ingredient(name="potato", quantity=NumericQuantity(2)),
                Text(" in a pot and boil for "),
                Timer(quantity=NumericQuantity(20), units="minutes"),
                Text("."),
            ]
        ]

    def test_windows_line_endings(self):
        recipe = parse(">> servings: 1\r\n\r\nStir.\r\n\r\nServe.")
        assert recipe.metadata == {"servings": "1"}
        assert len(recipe.steps) == 2

    def test_multi_word_ingredient(self):
        recipe = parse("Add @frozen mixed berries{1,5%cups}.")
        assert recipe.steps[0][1] == Ingredient(
            name="frozen mixed berries", quantity=NumericQuantity(1.5), units="cups"
        )


class TestParseComments:
    """Tests for comment handling."""

    def test_line_comment_removed(self):
        recipe = parse("Add @salt -- secret: lots")
        assert recipe.steps == [[Text("Add "), Ingredient(name="salt")]]

    def test_block_comment_removed(self):
        recipe = parse("Add [- plenty of -]@pepper{}.")
        assert recipe.steps == [[Text("Add "), Ingredient(name="pepper"), Text(".")]]

    def test_comment_text_leaves_no_trace(self, smoothie_source):
        recipe = parse(smoothie_source)
        dumped = recipe.to_json()
        assert "taste before serving" not in dumped
        assert "optional" not in dumped

    def test_commented_metadata_ignored(self):
        recipe = parse("-- >> servings: 2\nStir.")
        assert recipe.metadata == {}


class TestParseShoppingList:
    """Tests for the trailing shopping-list section."""

    def test_shopping_list(self):
        recipe = parse("Chop @onion.\n\n[produce]\nonion\nbell pepper|capsicum")
        assert recipe.shopping_list == {
            "produce": [
                ShoppingItem(name="onion"),
                ShoppingItem(name="bell pepper", synonym="capsicum"),
            ]
        }
        assert len(recipe.steps) == 1

    def test_section_is_terminal(self):
        recipe = parse("[produce]\nonion\n\n>> servings: 2\nMash @banana.")
        assert recipe.metadata == {}
        assert recipe.steps == []
        assert [item.name for item in recipe.shopping_list["produce"]] == [
            "onion",
            ">> servings: 2",
            "Mash @banana.",
        ]

    def test_header_directly_after_step(self):
        recipe = parse("Stir.\n[dairy]\nmilk")
        assert recipe.steps == [[Text("Stir.")]]
        assert recipe.shopping_list == {"dairy": [ShoppingItem(name="milk")]}


class TestParseFixture:
    """Tests against a full recipe."""

    def test_full_recipe(self, smoothie_source):
        recipe = parse(smoothie_source)

        assert recipe.metadata == {"servings": "2", "source": "https://cooklang.org"}
        assert len(recipe.steps) == 3
        assert recipe.steps[0] == [
            Text("Blend "),
            Ingredient(name="frozen mixed berries", quantity=NumericQuantity(1.5), units="cups"),
            Text(", "),
            Ingredient(name="banana"),
            Text(" and "),
            Ingredient(name="milk", quantity=NumericQuantity(250), units="ml"),
            Text(" in a "),
            Cookware(name="blender"),
            Text("."),
        ]
        assert recipe.steps[1][-2] == Timer(quantity=NumericQuantity(1), units="minute")
        assert recipe.steps[2][1] == Ingredient(
            name="mint leaves", quantity=TextQuantity("a few")
        )
        assert list(recipe.shopping_list) == ["fruit", "dairy"]
        assert recipe.shopping_list["fruit"][1] == ShoppingItem(
            name="frozen mixed berries", synonym="berries"
        )


class TestTotality:
    """The parser accepts any input."""

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "\n\n\n",
            "@",
            "#{",
            "~}",
            "@a{b{c}}}",
            "[- never closed",
            "[]",
            "[",
            ">>",
            ">> :",
            "@@##~~{{}}%%",
            "\x00\t\u200b@x{\u00a0}",
        ],
    )
    def test_never_raises(self, source):
        recipe = parse(source)
        assert isinstance(recipe, Recipe)


class TestRecipeParser:
    """Tests for the parser object."""

    def test_reusable(self):
        parser = RecipeParser()
        first = parser.parse(">> a: 1\nOne.")
        second = parser.parse("Two.")
        assert first.metadata == {"a": "1"}
        assert second.metadata == {}
        assert second.steps == [[Text("Two.")]]
        assert first.steps == [[Text("One.")]]

    def test_state_resets_after_parse(self):
        parser = RecipeParser()
        parser.parse("[produce]\nonion")
        assert parser.state is ParserState.START
