"""Tests for AZN currency formatting."""

import pytest

from azpay.sdk import format_breakdown, format_currency, gross_to_net


class TestFormatCurrency:

    @pytest.mark.parametrize("amount,expected", [
        (0, "0,00 ₼"),
        (5, "5,00 ₼"),
        (839, "839,00 ₼"),
        (1234.56, "1.234,56 ₼"),
        (1234567.891, "1.234.567,89 ₼"),
        (-5, "-5,00 ₼"),
    ])
    def test_format(self, amount, expected):
        assert format_currency(amount) == expected


class TestFormatBreakdown:

    def test_pairs_amount_with_text(self):
        formatted = format_breakdown(gross_to_net(1000))

        assert formatted["net_salary"] == {"amount": 839.0, "formatted": "839,00 ₼"}
        assert formatted["gross_salary"] == {"amount": 1000.0, "formatted": "1.000,00 ₼"}
        assert formatted["social_security"]["dsmf"] == {"amount": 106.0, "formatted": "106,00 ₼"}
        assert formatted["social_security"]["total"]["formatted"] == "131,00 ₼"
        assert formatted["total_deductions"]["formatted"] == "161,00 ₼"

    def test_does_not_change_amounts(self):
        breakdown = gross_to_net(4321.09)
        formatted = format_breakdown(breakdown)
        assert formatted["income_tax"]["amount"] == breakdown.income_tax
        assert formatted["social_security"]["medical"]["amount"] == breakdown.social_security.medical
