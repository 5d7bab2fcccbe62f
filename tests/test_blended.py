"""组合贷平滑月供测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from core.amortization import monthly_payment, payment_factor, total_interest
from core.blended import blended_monthly_payment, evaluate_blend
from data_manager.schema import LoanTerm


class TestBlendedMonthlyPayment:
    def test_formula(self):
        expected = (
            (60 + monthly_payment(40, 0.029, 120) / payment_factor(0.044, 120))
            * payment_factor(0.044, 300)
        )
        assert blended_monthly_payment(40, 0.029, 120, 60, 0.044, 300) == pytest.approx(expected)

    def test_no_short_tranche_equals_long_loan(self):
        assert blended_monthly_payment(0, 0.029, 120, 100, 0.044, 300) == pytest.approx(
            monthly_payment(100, 0.044, 300)
        )

    def test_same_terms_is_neutral(self):
        """短期与长期条件相同时，拆分不影响月供"""
        assert blended_monthly_payment(30, 0.044, 300, 70, 0.044, 300) == pytest.approx(
            monthly_payment(100, 0.044, 300)
        )

    def test_cheaper_short_loan_lowers_payment(self):
        full_long = monthly_payment(100, 0.044, 300)
        assert blended_monthly_payment(20, 0.029, 120, 80, 0.044, 300) < full_long


class TestEvaluateBlend:
    def test_ratio_zero(self):
        short = LoanTerm(0.029, 120)
        long = LoanTerm(0.044, 300)
        result = evaluate_blend(0.0, short, long)
        assert result.ratio == 0.0
        assert result.monthly_payment == pytest.approx(monthly_payment(100, 0.044, 300))
        assert result.total_interest == pytest.approx(
            total_interest(result.monthly_payment, 100, 300)
        )

    def test_interest_over_long_horizon(self):
        result = evaluate_blend(25.0, LoanTerm(0.032, 144), LoanTerm(0.044, 300))
        assert result.total_interest == pytest.approx(result.monthly_payment * 300 - 100)
        assert result.total_interest > 0
