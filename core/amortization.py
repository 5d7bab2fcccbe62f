"""核心计算：等额本息系数、月供、总利息、等效年利率"""
import math

from scipy import optimize

from config.settings import MONTHS_PER_YEAR
from core.exceptions import InvalidLoanInputError


def _check_rate_and_duration(annual_rate: float, duration_months: float) -> None:
    if annual_rate is None or duration_months is None:
        raise InvalidLoanInputError("利率和期限不能为空")
    if math.isnan(annual_rate) or math.isnan(duration_months):
        raise InvalidLoanInputError("利率和期限必须是数字")
    # 零利率不走极限公式 (本金/期数)，统一视为无效输入
    if annual_rate <= 0:
        raise InvalidLoanInputError(f"年利率必须大于0: {annual_rate}")
    if duration_months <= 0:
        raise InvalidLoanInputError(f"期限必须大于0: {duration_months}")


def payment_factor(annual_rate: float, duration_months: float) -> float:
    """等额本息系数：每 1 元本金对应的月供 r / (1 - (1+r)^-n)，r = 年利率/12"""
    _check_rate_and_duration(annual_rate, duration_months)
    r = annual_rate / MONTHS_PER_YEAR
    # 1 - (1+r)^-n，用 expm1/log1p 计算，利率极小时不会抵消为 0
    denominator = -math.expm1(-duration_months * math.log1p(r))
    if denominator == 0:
        raise InvalidLoanInputError(f"利率过小，无法计算月供: {annual_rate}")
    return r / denominator


def monthly_payment(principal, annual_rate: float, duration_months: float):
    """月供。principal 可以是标量或 numpy 数组"""
    return principal * payment_factor(annual_rate, duration_months)


def total_interest(payment, principal, duration_months: float):
    """总利息 = 月供 × 期数 − 本金"""
    return payment * duration_months - principal


def equivalent_annual_rate(
    payment: float,
    principal: float,
    duration_months: float,
) -> float:
    """反解等效年利率：月供相同的单一等额本息贷款的年利率。无解时返回 0.0"""
    if principal <= 0 or duration_months <= 0:
        return 0.0

    def gap(rate):
        return monthly_payment(principal, rate, duration_months) - payment

    try:
        rate = optimize.brentq(gap, 1e-9, 2.0)
        return round(float(rate), 6)
    except (ValueError, RuntimeError):
        return 0.0


def amortization_totals(principal: float, annual_rate: float, duration_months: float):
    """返回 (月供, 总利息)"""
    payment = monthly_payment(principal, annual_rate, duration_months)
    return payment, total_interest(payment, principal, duration_months)
