"""
短期贷款最优借款比例搜索

在 (0, 100) 区间按固定步长扫描短期贷款占比，找出长期贷款月供最低、
且仍足以覆盖长期贷款利息的比例。
"""
import logging
from decimal import Decimal
from typing import Dict, Optional

import numpy as np
import pandas as pd

from config.constants import RATIO_PROFILE_COLUMNS
from config.settings import PROFILE_STEP, RATIO_PRECISION, TOTAL_AMOUNT
from core.amortization import monthly_payment, total_interest
from core.blended import blended_monthly_payment
from core.exceptions import InvalidLoanInputError
from data_manager.data_validator import validate_loan_term, validate_precision

logger = logging.getLogger(__name__)


def _step_decimals(step: float) -> int:
    """步长的小数位数：0.0001 -> 4"""
    exponent = Decimal(str(step)).normalize().as_tuple().exponent
    return max(0, -exponent)


def _ratio_grid(step: float, total_amount: float) -> np.ndarray:
    """短期金额网格 k*step，k = 1, 2, ... 直到长期金额不大于 step 为止"""
    steps = int(round(total_amount / step))
    return np.arange(1, steps - 1) * step


def _evaluate_grid(
    amounts_short: np.ndarray,
    rate_short: float,
    duration_short: float,
    rate_long: float,
    duration_long: float,
    total_amount: float,
) -> Dict[str, np.ndarray]:
    amounts_long = total_amount - amounts_short

    smoothed = blended_monthly_payment(
        amounts_short, rate_short, duration_short,
        amounts_long, rate_long, duration_long,
    )
    short_payment = monthly_payment(amounts_short, rate_short, duration_short)
    # 短期贷款存续期间，平滑月供中属于长期贷款的部分
    long_payment = smoothed - short_payment

    smooth_interest = total_interest(smoothed, total_amount, duration_long)
    short_interest = total_interest(short_payment, amounts_short, duration_short)
    long_interest = smooth_interest - short_interest

    # 在短期期限内覆盖长期贷款利息所需的最低月供
    min_long_payment = long_interest / duration_short

    return {
        "ratio": amounts_short,
        "smoothed_payment": smoothed,
        "short_payment": short_payment,
        "long_payment": long_payment,
        "min_long_payment": min_long_payment,
        "feasible": long_payment >= min_long_payment,
    }


def _validate_search_input(rate_short, duration_short, rate_long, duration_long) -> bool:
    for rate, duration in ((rate_short, duration_short), (rate_long, duration_long)):
        ok, msg = validate_loan_term(rate, duration)
        if not ok:
            logger.error("The provided parameters are not valid: %s", msg)
            return False
    return True


def find_best_ratio(
    rate_short: float,
    duration_short: float,
    rate_long: float,
    duration_long: float,
    precision: float = RATIO_PRECISION,
    total_amount: float = TOTAL_AMOUNT,
) -> Optional[float]:
    """
    返回短期贷款最优借款比例 (%)。

    长期贷款月供只覆盖利息时达到比例上限；在所有可行比例中取长期月供最小者，
    并列时取先扫描到的（较小的）比例。
    无可行比例返回 0.0；参数无效返回 None。
    """
    if not _validate_search_input(rate_short, duration_short, rate_long, duration_long):
        return None
    ok, msg = validate_precision(precision, total_amount)
    if not ok:
        logger.error("The provided parameters are not valid: %s", msg)
        return None

    try:
        grid = _evaluate_grid(
            _ratio_grid(precision, total_amount),
            rate_short, duration_short, rate_long, duration_long, total_amount,
        )
    except InvalidLoanInputError as e:
        logger.error("The provided parameters are not valid: %s", e)
        return None

    feasible = grid["feasible"]
    if not feasible.any():
        logger.info(
            "No feasible ratio for short=(%s, %s) long=(%s, %s)",
            rate_short, duration_short, rate_long, duration_long,
        )
        return 0.0

    # 不可行位置置为 inf；argmin 返回第一个最小值，即先找到者胜出
    candidates = np.where(feasible, grid["long_payment"], np.inf)
    best = int(np.argmin(candidates))
    ratio = round(float(grid["ratio"][best]), _step_decimals(precision))
    logger.debug("Best ratio %s (long payment %.6f)", ratio, candidates[best])
    return ratio


def ratio_profile(
    rate_short: float,
    duration_short: float,
    rate_long: float,
    duration_long: float,
    step: float = PROFILE_STEP,
    total_amount: float = TOTAL_AMOUNT,
) -> pd.DataFrame:
    """按较粗步长生成比例扫描曲线，用于报表和图表。参数无效返回空表"""
    if not _validate_search_input(rate_short, duration_short, rate_long, duration_long):
        return pd.DataFrame(columns=RATIO_PROFILE_COLUMNS)
    ok, msg = validate_precision(step, total_amount)
    if not ok:
        logger.error("The provided parameters are not valid: %s", msg)
        return pd.DataFrame(columns=RATIO_PROFILE_COLUMNS)

    try:
        grid = _evaluate_grid(
            _ratio_grid(step, total_amount),
            rate_short, duration_short, rate_long, duration_long, total_amount,
        )
    except InvalidLoanInputError as e:
        logger.error("The provided parameters are not valid: %s", e)
        return pd.DataFrame(columns=RATIO_PROFILE_COLUMNS)
    df = pd.DataFrame(grid, columns=RATIO_PROFILE_COLUMNS)
    df["ratio"] = df["ratio"].round(_step_decimals(step))
    return df
