# This project was developed with assistance from AI tools.
"""Tests for calculator input validation."""

from affordability.schemas.calculator import InvalidInput, RawInputs
from affordability.services.validation import parse_amount, validate, validate_field


class TestParseAmount:
    def test_numbers_pass_through(self):
        assert parse_amount(240) == 240.0
        assert parse_amount(3.5) == 3.5

    def test_grouped_thousands(self):
        assert parse_amount("200 000") == 200000

    def test_french_decimal_comma(self):
        assert parse_amount("3,5") == 3.5

    def test_formatted_currency(self):
        assert parse_amount("1 160,12 €") == 1160.12

    def test_percent_sign(self):
        assert parse_amount("35 %") == 35

    def test_rejects_text(self):
        assert parse_amount("abc") is None

    def test_rejects_blank(self):
        assert parse_amount("") is None
        assert parse_amount("   ") is None

    def test_rejects_non_finite(self):
        assert parse_amount("nan") is None
        assert parse_amount("inf") is None
        assert parse_amount(float("inf")) is None

    def test_rejects_int_beyond_float_range(self):
        assert parse_amount(10**400) is None

    def test_rejects_bool_and_none(self):
        assert parse_amount(True) is None
        assert parse_amount(None) is None

    def test_rejects_ambiguous_separators(self):
        assert parse_amount("1,2,3") is None
        assert parse_amount("1.160,12") is None


class TestValidateField:
    def test_price_must_be_positive(self):
        ok, msg, _ = validate_field("price", "0")
        assert not ok and "positive" in msg

    def test_rent_zero_is_allowed(self):
        ok, _, val = validate_field("rent", "0")
        assert ok and val == 0

    def test_rejects_negative_debt(self):
        ok, msg, _ = validate_field("currentDebt", "-50")
        assert not ok and "negative" in msg

    def test_term_whole_number(self):
        ok, _, val = validate_field("term", "240")
        assert ok and val == 240 and isinstance(val, int)

    def test_term_accepts_integral_float(self):
        ok, _, val = validate_field("term", 240.0)
        assert ok and val == 240

    def test_term_rejects_fraction(self):
        ok, msg, _ = validate_field("term", "240.5")
        assert not ok and "whole" in msg

    def test_ratio_above_one_rejected(self):
        ok, msg, _ = validate_field("maxDebtRatio", "1.2")
        assert not ok and "between 0 and 1" in msg

    def test_unknown_field(self):
        ok, _, _ = validate_field("colour", "blue")
        assert not ok


class TestValidate:
    def test_valid_vector(self, scenario):
        inputs = validate(scenario)
        assert isinstance(inputs, RawInputs)
        assert inputs.price == 200000
        assert inputs.annual_rate_percent == 3.5
        assert inputs.term_months == 240
        assert inputs.current_monthly_debt == 200

    def test_negative_price_is_invalid(self, scenario):
        scenario["price"] = -1
        outcome = validate(scenario)
        assert isinstance(outcome, InvalidInput)
        assert set(outcome.errors) == {"price"}

    def test_huge_int_price_is_invalid(self, scenario):
        scenario["price"] = 10**400
        outcome = validate(scenario)
        assert isinstance(outcome, InvalidInput)
        assert outcome.errors == {"price": "Price must be a number"}

    def test_zero_rate_is_invalid(self, scenario):
        scenario["rate"] = 0
        assert isinstance(validate(scenario), InvalidInput)

    def test_missing_required_field(self, scenario):
        del scenario["income"]
        outcome = validate(scenario)
        assert isinstance(outcome, InvalidInput)
        assert outcome.errors["income"] == "Required"

    def test_every_failing_field_is_reported(self, scenario):
        scenario.update(price="abc", term=0, rent=-5)
        outcome = validate(scenario)
        assert set(outcome.errors) == {"price", "term", "rent"}
        assert "price" in outcome.message and "term" in outcome.message

    def test_missing_ratios_take_defaults(self, scenario):
        del scenario["maxDebtRatio"]
        scenario["rentInclusionRatio"] = ""
        inputs = validate(scenario)
        assert inputs.max_debt_ratio == 0.35
        assert inputs.rent_inclusion_ratio == 0.7

    def test_unknown_keys_are_ignored(self, scenario):
        scenario["notes"] = "corner flat"
        assert isinstance(validate(scenario), RawInputs)

    def test_text_form_values(self):
        inputs = validate({
            "price": "185 000",
            "rent": "750",
            "rate": "3,2",
            "term": "300",
            "income": "2 800",
            "currentDebt": "0",
            "maxDebtRatio": "0,35",
            "rentInclusionRatio": "0,7",
        })
        assert isinstance(inputs, RawInputs)
        assert inputs.annual_rate_percent == 3.2
        assert inputs.income == 2800


def test_store_snapshot_round_trips(scenario):
    scenario["rate"] = 3.1234567891234
    inputs = validate(scenario)
    snapshot = inputs.to_store()
    assert all(isinstance(v, str) for v in snapshot.values())
    assert validate(snapshot) == inputs
