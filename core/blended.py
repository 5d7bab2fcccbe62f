"""短期 + 长期组合贷的平滑月供"""
from config.settings import TOTAL_AMOUNT
from core.amortization import monthly_payment, payment_factor, total_interest
from data_manager.schema import BlendResult, LoanTerm


def blended_monthly_payment(
    amount_short,
    rate_short: float,
    duration_short: float,
    amount_long,
    rate_long: float,
    duration_long: float,
):
    """
    组合贷平滑月供。
    短期贷款的月供按长期利率折算成等值本金并入长期贷款，再按长期期限摊还：
    (amount_long + 短期月供 / p(rate_long, duration_short)) * p(rate_long, duration_long)

    前提：duration_short <= duration_long（短期贷款在长期贷款期内还清），此处不校验。
    金额参数可以是标量或 numpy 数组。
    """
    short_payment = monthly_payment(amount_short, rate_short, duration_short)
    return (
        (amount_long + short_payment / payment_factor(rate_long, duration_short))
        * payment_factor(rate_long, duration_long)
    )


def evaluate_blend(
    ratio: float,
    short: LoanTerm,
    long: LoanTerm,
    total_amount: float = TOTAL_AMOUNT,
) -> BlendResult:
    """按短期占比 ratio(%) 计算组合贷的平滑月供和总利息（按长期期限计）"""
    amount_short = total_amount * ratio / 100
    payment = blended_monthly_payment(
        amount_short, short.rate, short.duration_months,
        total_amount - amount_short, long.rate, long.duration_months,
    )
    interest = total_interest(payment, total_amount, long.duration_months)
    return BlendResult(ratio=ratio, monthly_payment=float(payment), total_interest=float(interest))
