"""Unit tests for grocery-list quantity formatting."""

from bitepath.config import get_settings
from bitepath.normalize.display import (
    DisplayQuantity,
    format_ingredient_details,
    format_quantity_for_display,
    pluralize_unit,
)


class TestPluralizeUnit:
    """Tests for pluralize_unit function."""

    def test_adds_s(self):
        assert pluralize_unit("cup", 2) == "cups"
        assert pluralize_unit("clove", 3) == "cloves"

    def test_y_becomes_ies(self):
        assert pluralize_unit("berry", 2) == "berries"

    def test_y_exceptions(self):
        """Test words like 'day' just take an s."""
        assert pluralize_unit("day", 2) == "days"
        assert pluralize_unit("Key", 2) == "Keys"

    def test_left_alone(self):
        """Test singular, metric and already-plural units are unchanged."""
        assert pluralize_unit("cup", 1) == "cup"
        assert pluralize_unit("cup", 0.5) == "cup"
        assert pluralize_unit("kg", 2) == "kg"
        assert pluralize_unit("L", 2) == "L"
        assert pluralize_unit("cups", 2) == "cups"
        assert pluralize_unit("", 2) == ""


class TestFormatQuantityForDisplay:
    """Tests for format_quantity_for_display function."""

    def test_imperial_keeps_units(self):
        result = format_quantity_for_display(2, "cup", "imperial")
        assert result == DisplayQuantity(quantity=2, unit="cups", muted=False)
        assert result.text == "2 cups"

    def test_metric_converts(self):
        """Test metric display converts mass units."""
        result = format_quantity_for_display(2, "lb", "metric")
        assert result.quantity == 907.2
        assert result.unit == "g"
        assert result.text == "907.2 g"

    def test_metric_keeps_kitchen_measures(self):
        """Test spoon measures survive metric display and are muted."""
        result = format_quantity_for_display(1, "tbsp", "metric")
        assert result.text == "1 tbsp"
        assert result.muted

    def test_rounds_to_one_decimal(self):
        result = format_quantity_for_display(1.25, "cup", "imperial")
        assert result.text == "1.3 cups"

        result = format_quantity_for_display(0.5, "cup", "imperial")
        assert result.text == "0.5 cup"

    def test_piece_units_show_number_only(self):
        result = format_quantity_for_display(3, "piece", "imperial")
        assert result.unit == "pieces"
        assert result.text == "3"

    def test_default_system_from_settings(self, monkeypatch):
        """Test the system defaults to BITEPATH_PREFERRED_UNIT_SYSTEM."""
        assert format_quantity_for_display(2, "lb").text == "2 lbs"

        monkeypatch.setenv("BITEPATH_PREFERRED_UNIT_SYSTEM", "metric")
        get_settings.cache_clear()
        assert format_quantity_for_display(2, "lb").text == "907.2 g"

    def test_huge_quantity(self):
        """Test very large quantities format without error."""
        result = format_quantity_for_display(1e300, "cup", "imperial")
        assert result.unit == "cups"
        assert isinstance(result.quantity, int)


class TestFormatIngredientDetails:
    """Tests for format_ingredient_details function."""

    def test_to_taste(self):
        result = format_ingredient_details(None, None, description="To Taste")
        assert result.text == "to taste"
        assert result.muted

    def test_missing_quantity_or_unit(self):
        """Test incomplete data yields an empty details line."""
        assert format_ingredient_details(None, "cup").text == ""
        assert format_ingredient_details(2, None).text == ""

    def test_numeric_string_quantity(self):
        assert format_ingredient_details("2", "cups", system="imperial").text == "2 cups"

    def test_non_numeric_quantity_skipped(self):
        """Test unparseable quantities signal the item should be skipped."""
        assert format_ingredient_details("a handful", "cup") is None
        assert format_ingredient_details("nan", "cup") is None
        assert format_ingredient_details("1e999", "cup") is None

    def test_leading_number_in_quantity_text(self):
        """Test quantity text is read up to its first non-numeric part."""
        assert format_ingredient_details("2 cups", "cup", system="imperial").text == "2 cups"
        assert format_ingredient_details("1 1/2", "cup", system="imperial").text == "1 cup"
        assert format_ingredient_details(" .5", "cup", system="imperial").text == "0.5 cup"

    def test_zero_quantity_shows_unit(self):
        result = format_ingredient_details(0, "pinch", system="imperial")
        assert result.text == "pinch"
        assert result.muted

    def test_metric_details(self):
        result = format_ingredient_details(1500, "g", system="metric")
        assert result.text == "1.5 kg"
