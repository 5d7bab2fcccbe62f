"""核心计算测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from core.amortization import (
    payment_factor,
    monthly_payment,
    total_interest,
    equivalent_annual_rate,
    amortization_totals,
)
from core.exceptions import InvalidLoanInputError


class TestPaymentFactor:
    @pytest.mark.parametrize("rate,duration", [
        (0.0115, 180), (0.018, 300), (0.044, 300), (0.022, 12), (0.15, 1),
    ])
    def test_positive(self, rate, duration):
        assert payment_factor(rate, duration) > 0

    def test_matches_annuity_formula(self):
        r = 0.044 / 12
        expected = r * (1 + r) ** 300 / ((1 + r) ** 300 - 1)
        assert payment_factor(0.044, 300) == pytest.approx(expected)

    def test_single_period(self):
        """一期还清：本金 + 一个月利息"""
        assert payment_factor(0.12, 1) == pytest.approx(1.01)

    @pytest.mark.parametrize("rate,duration", [
        (0, 300), (0.044, 0), (-0.01, 120), (0.044, -12), (None, 120), (float("nan"), 120),
    ])
    def test_invalid_input(self, rate, duration):
        with pytest.raises(InvalidLoanInputError):
            payment_factor(rate, duration)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            payment_factor(0, 12)

    def test_tiny_rate_stays_finite(self):
        """利率极小时接近 1/n，不会出现除零"""
        assert payment_factor(1e-17, 120) == pytest.approx(1 / 120)

    def test_underflowing_rate(self):
        with pytest.raises(InvalidLoanInputError):
            payment_factor(5e-324, 120)


class TestMonthlyPayment:
    def test_basic_calculation(self):
        """100万, 30年, 3.45% -> 月供约 4462"""
        monthly = monthly_payment(1_000_000, 0.0345, 360)
        assert 4450 < monthly < 4475

    def test_scales_with_principal(self):
        assert monthly_payment(200, 0.03, 120) == pytest.approx(2 * monthly_payment(100, 0.03, 120))

    def test_accepts_arrays(self):
        principals = np.array([10.0, 20.0, 30.0])
        payments = monthly_payment(principals, 0.03, 120)
        assert payments.shape == (3,)
        assert payments[1] == pytest.approx(monthly_payment(20.0, 0.03, 120))

    def test_higher_than_straight_line(self):
        assert monthly_payment(100000, 0.05, 12) > 100000 / 12


class TestTotalInterest:
    @pytest.mark.parametrize("principal,rate,duration", [
        (100, 0.029, 120), (100, 0.044, 300), (1_000_000, 0.0345, 360), (0.0001, 0.0115, 180),
    ])
    def test_non_negative(self, principal, rate, duration):
        payment = monthly_payment(principal, rate, duration)
        assert total_interest(payment, principal, duration) >= 0

    def test_definition(self):
        assert total_interest(10, 100, 12) == 20

    def test_total_repayment(self):
        """总还款 = 本金 + 总利息"""
        monthly, interest = amortization_totals(500000, 0.04, 240)
        assert monthly * 240 == pytest.approx(500000 + interest)


class TestEquivalentRate:
    def test_recovers_nominal_rate(self):
        payment = monthly_payment(100, 0.044, 300)
        assert equivalent_annual_rate(payment, 100, 300) == pytest.approx(0.044, abs=1e-6)

    def test_no_interest_returns_zero(self):
        """月供不足以产生正利率时无解"""
        assert equivalent_annual_rate(100 / 300, 100, 300) == 0.0

    def test_invalid_principal(self):
        assert equivalent_annual_rate(1.0, 0, 300) == 0.0
