# accounting/tests/test_balance_validator.py

from __future__ import annotations

from django.test import SimpleTestCase

from accounting.services.balance_validator import (
    MAX_AMOUNT,
    MSG_AMOUNT,
    MSG_AMOUNT_RANGE,
    MSG_EMPTY,
    MSG_SIDE,
    MSG_UNBALANCED,
    check_balance,
)
from accounting.services.exceptions import ErrorKind, LedgerValidationError


def _line(dc_type, amount, account_id=1):
    return {"dc_type": dc_type, "amount": amount, "account_id": account_id}


class BalanceValidatorTests(SimpleTestCase):
    """
    GUARANTEES:
    - debit total == credit total, or a validation outcome
    - side must be exactly DEBIT / CREDIT (case-sensitive)
    - amounts are positive integers
    - only the first violation is reported
    """

    def test_balanced_lines_pass_with_totals(self):
        result = check_balance(
            [
                _line("DEBIT", 6000),
                _line("DEBIT", 4000),
                _line("CREDIT", 10000),
            ]
        )

        self.assertTrue(result.ok)
        self.assertEqual(result.debit_total, 10000)
        self.assertEqual(result.credit_total, 10000)

    def test_unbalanced_lines_fail(self):
        result = check_balance([_line("DEBIT", 10000), _line("CREDIT", 9000)])

        self.assertFalse(result.ok)
        self.assertEqual(result.error.message, MSG_UNBALANCED)
        self.assertEqual(result.error.kind, ErrorKind.VALIDATION)
        self.assertEqual((result.debit_total, result.credit_total), (0, 0))

    def test_side_is_case_sensitive(self):
        result = check_balance([_line("debit", 100), _line("CREDIT", 100)])

        self.assertFalse(result.ok)
        self.assertEqual(result.error.message, MSG_SIDE)

    def test_invalid_side_wins_over_imbalance(self):
        result = check_balance([_line("DEBIT", 100), _line("BOTH", 5)])

        self.assertEqual(result.error.message, MSG_SIDE)

    def test_first_violation_in_input_order_is_reported(self):
        result = check_balance([_line("DEBIT", 0), _line("X", 100)])

        self.assertEqual(result.error.message, MSG_AMOUNT)

    def test_zero_and_negative_amounts_are_rejected(self):
        for amount in (0, -100):
            with self.subTest(amount=amount):
                result = check_balance([_line("DEBIT", amount), _line("CREDIT", amount)])
                self.assertEqual(result.error.message, MSG_AMOUNT)

    def test_non_integer_amount_is_rejected(self):
        result = check_balance([_line("DEBIT", True), _line("CREDIT", 1)])

        self.assertEqual(result.error.message, MSG_AMOUNT)

    def test_amount_above_bigint_range_is_rejected(self):
        result = check_balance([_line("DEBIT", MAX_AMOUNT + 1), _line("CREDIT", MAX_AMOUNT + 1)])

        self.assertFalse(result.ok)
        self.assertEqual(result.error.message, MSG_AMOUNT_RANGE)

        at_limit = check_balance([_line("DEBIT", MAX_AMOUNT), _line("CREDIT", MAX_AMOUNT)])
        self.assertTrue(at_limit.ok)

    def test_empty_lines_fail(self):
        result = check_balance([])

        self.assertEqual(result.error.message, MSG_EMPTY)

    def test_raise_for_error(self):
        with self.assertRaisesMessage(LedgerValidationError, MSG_UNBALANCED):
            check_balance([_line("DEBIT", 1), _line("CREDIT", 2)]).raise_for_error()

        ok = check_balance([_line("DEBIT", 1), _line("CREDIT", 1)])
        self.assertIs(ok.raise_for_error(), ok)

    def test_is_deterministic(self):
        lines = [_line("DEBIT", 250), _line("CREDIT", 250)]

        self.assertEqual(check_balance(lines), check_balance(lines))
