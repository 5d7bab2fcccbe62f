import math
from numbers import Real
from typing import Any, List, Optional, Tuple

from data_manager.schema import LoanOffer, SkippedCandidate


def _is_positive_number(value: Any) -> bool:
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return False
    if math.isnan(value) or math.isinf(value):
        return False
    return value > 0


def validate_loan_term(rate: Any, duration: Any) -> Tuple[bool, str]:
    """校验利率和期限，返回 (是否合法, 错误信息)"""
    if rate is None or duration is None:
        return False, "利率和期限不能为空"

    if not _is_positive_number(rate):
        return False, f"利率必须是大于0的数字: {rate!r}"

    if not _is_positive_number(duration):
        return False, f"期限必须是大于0的数字: {duration!r}"

    return True, ""


def validate_loan_offer(raw: Any) -> Tuple[Optional[LoanOffer], str]:
    """校验 (年利率, 年限) 形式的贷款，返回 (LoanOffer 或 None, 错误信息)"""
    if isinstance(raw, LoanOffer):
        rate, years = raw.rate, raw.duration_years
    elif isinstance(raw, (list, tuple)):
        if len(raw) != 2:
            return None, f"贷款参数必须是 (年利率, 年限) 两项: {raw!r}"
        rate, years = raw
    else:
        return None, f"无法识别的贷款参数: {raw!r}"

    ok, msg = validate_loan_term(rate, years)
    if not ok:
        return None, msg

    return LoanOffer(float(rate), float(years)), ""


def normalize_candidates(
    raw_candidates: List[Any],
    max_duration_years: Optional[float] = None,
) -> Tuple[List[LoanOffer], List[SkippedCandidate]]:
    """
    过滤并转换候选贷款。
    无效项（缺参数、为零、期限长于参照贷款）记入 skipped，不影响其余候选。
    """
    offers = []
    skipped = []
    for i, raw in enumerate(raw_candidates):
        offer, msg = validate_loan_offer(raw)
        if offer is None:
            skipped.append(SkippedCandidate(i, raw, msg))
            continue
        if max_duration_years is not None and offer.duration_years > max_duration_years:
            skipped.append(SkippedCandidate(
                i, raw, f"短期贷款期限 {offer.duration_years:g} 年长于参照贷款 {max_duration_years:g} 年",
            ))
            continue
        offers.append(offer)
    return offers, skipped


def validate_precision(precision: Any, total_amount: float) -> Tuple[bool, str]:
    """校验扫描步长：0 < precision < total_amount"""
    if not _is_positive_number(precision):
        return False, f"扫描步长必须是大于0的数字: {precision!r}"
    if precision >= total_amount:
        return False, f"扫描步长必须小于借款总额 {total_amount}: {precision!r}"
    return True, ""
