"""输入校验测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from data_manager.data_validator import (
    validate_loan_term, validate_loan_offer, normalize_candidates, validate_precision,
)
from data_manager.schema import LoanOffer, LoanTerm
from utils.units import years_to_months, months_to_years


class TestValidateLoanTerm:
    def test_valid(self):
        assert validate_loan_term(0.044, 300) == (True, "")

    @pytest.mark.parametrize("rate,duration", [
        (None, 300), (0.044, None), (0, 300), (0.044, 0), (-0.01, 300),
        (float("nan"), 300), (0.044, float("inf")), ("0.044", 300), (True, 300),
    ])
    def test_invalid(self, rate, duration):
        ok, msg = validate_loan_term(rate, duration)
        assert not ok
        assert msg


class TestValidateLoanOffer:
    def test_tuple(self):
        offer, msg = validate_loan_offer((0.029, 10))
        assert offer == LoanOffer(0.029, 10.0)
        assert msg == ""

    def test_list(self):
        offer, _ = validate_loan_offer([0.029, 10])
        assert offer == LoanOffer(0.029, 10.0)

    def test_loan_offer_passthrough(self):
        offer, _ = validate_loan_offer(LoanOffer(0.032, 12))
        assert offer == LoanOffer(0.032, 12.0)

    @pytest.mark.parametrize("raw", [[], (0.03,), (0.03, 10, 1), None, "0.03,10", {"rate": 0.03}])
    def test_invalid_shape(self, raw):
        offer, msg = validate_loan_offer(raw)
        assert offer is None
        assert msg


class TestNormalizeCandidates:
    def test_filters_and_keeps_order(self):
        offers, skipped = normalize_candidates([(0.029, 10), (None, 12), (0.035, 15)])
        assert offers == [LoanOffer(0.029, 10.0), LoanOffer(0.035, 15.0)]
        assert [s.index for s in skipped] == [1]
        assert skipped[0].raw == (None, 12)

    def test_max_duration(self):
        offers, skipped = normalize_candidates([(0.029, 10), (0.02, 30), (0.044, 25)], max_duration_years=25)
        assert offers == [LoanOffer(0.029, 10.0), LoanOffer(0.044, 25.0)]
        assert [s.index for s in skipped] == [1]


class TestUnits:
    def test_years_to_months(self):
        assert years_to_months(25) == 300
        assert years_to_months(1.5) == 18

    def test_fractional_years_not_rounded(self):
        assert years_to_months(10.3) == pytest.approx(123.6)

    def test_months_to_years(self):
        assert months_to_years(300) == 25

    def test_loan_offer_round_trip(self):
        term = LoanOffer(0.044, 25).to_term()
        assert term == LoanTerm(0.044, 300)
        assert LoanOffer.from_term(term) == LoanOffer(0.044, 25.0)


class TestValidatePrecision:
    def test_valid(self):
        assert validate_precision(0.0001, 100) == (True, "")

    @pytest.mark.parametrize("precision", [0, -0.1, 100, 101, None, float("nan"), "0.1"])
    def test_invalid(self, precision):
        ok, msg = validate_precision(precision, 100)
        assert not ok
        assert msg
