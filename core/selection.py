"""在多个短期贷款报价中选出与参照贷款组合后总利息最低的方案"""
import logging
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd

from config.constants import CANDIDATE_COMPARISON_COLUMNS, SearchOutcome
from config.settings import RATIO_PRECISION, TOTAL_AMOUNT
from core.amortization import equivalent_annual_rate
from core.blended import evaluate_blend
from core.exceptions import InvalidLoanInputError, NegativeInterestError
from core.ratio_search import find_best_ratio
from data_manager.data_validator import normalize_candidates, validate_loan_offer, validate_precision
from data_manager.schema import (
    BestCombination,
    BlendResult,
    LoanOffer,
    LoanTerm,
    SelectionResult,
    SkippedCandidate,
)

logger = logging.getLogger(__name__)


def evaluate_candidate(
    reference: LoanTerm,
    candidate: LoanTerm,
    precision: float = RATIO_PRECISION,
) -> BlendResult:
    """候选贷款作为短期、参照贷款作为长期，求最优比例及对应的月供和总利息"""
    ratio = find_best_ratio(
        candidate.rate, candidate.duration_months,
        reference.rate, reference.duration_months,
        precision=precision,
    )
    if ratio is None:
        raise InvalidLoanInputError(f"无法搜索比例：short={candidate}, long={reference}, precision={precision}")
    result = evaluate_blend(ratio, candidate, reference, TOTAL_AMOUNT)
    if result.total_interest < 0:
        raise NegativeInterestError(
            f"组合总利息为负 ({result.total_interest:.6f})："
            f"short={candidate}, long={reference}, ratio={ratio}"
        )
    return result


def _prepare(
    reference_loan: Any,
    candidates: Optional[Sequence[Any]],
    precision: float,
) -> Tuple[Optional[LoanOffer], List[Tuple[int, LoanOffer]], List[SkippedCandidate], str]:
    """校验参照贷款、扫描步长并过滤候选贷款，返回 (参照贷款, 有效候选, 跳过项, 错误信息)"""
    ok, msg = validate_precision(precision, TOTAL_AMOUNT)
    if not ok:
        return None, [], [], msg
    reference, msg = validate_loan_offer(reference_loan)
    if reference is None:
        return None, [], [], f"参照贷款无效: {msg}"
    if not candidates:
        return None, [], [], "候选贷款列表为空"

    candidates = list(candidates)
    offers, skipped = normalize_candidates(candidates, reference.duration_years)
    for item in skipped:
        _warn_skipped(item)
    if not offers:
        return None, [], skipped, "没有有效的候选贷款"

    skipped_indexes = {item.index for item in skipped}
    indexes = [i for i in range(len(candidates)) if i not in skipped_indexes]
    return reference, list(zip(indexes, offers)), skipped, ""


def _warn_skipped(item: SkippedCandidate) -> None:
    logger.warning(
        "The parameters of a loan in candidates are not valid. "
        "This loan will be ignored. index=%d reason=%s",
        item.index, item.reason,
    )


def _evaluate_offers(
    reference: LoanOffer,
    offers: List[Tuple[int, LoanOffer]],
    skipped: List[SkippedCandidate],
    precision: float,
) -> List[Tuple[LoanOffer, BlendResult]]:
    """逐个评估候选贷款；无法计算月供的候选记入 skipped"""
    reference_term = reference.to_term()
    evaluated = []
    for index, offer in offers:
        try:
            result = evaluate_candidate(reference_term, offer.to_term(), precision)
        except InvalidLoanInputError as e:
            item = SkippedCandidate(index, offer.as_tuple(), str(e))
            _warn_skipped(item)
            skipped.append(item)
            continue
        evaluated.append((offer, result))
    return evaluated


def find_best_combination(
    reference_loan: Any,
    candidates: Optional[Sequence[Any]],
    precision: float = RATIO_PRECISION,
) -> SelectionResult:
    """
    找出总利息最低的贷款组合。

    reference_loan: 参照（长期）贷款 (年利率, 年限)
    candidates: 短期贷款报价列表 [(年利率, 年限), ...]
    返回 SelectionResult；参数无效或无可行组合时 best 为 None，不抛异常。
    """
    reference, offers, skipped, msg = _prepare(reference_loan, candidates, precision)
    if reference is None:
        logger.error("The provided parameters are not valid: %s", msg)
        return SelectionResult(SearchOutcome.INVALID_INPUT, skipped=skipped, message=msg)

    evaluated = _evaluate_offers(reference, offers, skipped, precision)
    if not evaluated:
        msg = "没有可计算的候选贷款"
        logger.error("The provided parameters are not valid: %s", msg)
        return SelectionResult(SearchOutcome.INVALID_INPUT, skipped=skipped, message=msg)

    best_offer = None
    best_ratio = None
    best_interest = None

    for offer, result in evaluated:
        if best_interest is None or result.total_interest < best_interest:
            best_interest = result.total_interest
            best_offer = offer
            best_ratio = result.ratio

    if best_ratio == 0:
        logger.error("There are no possible combinations.")
        return SelectionResult(
            SearchOutcome.INFEASIBLE, skipped=skipped,
            message=SearchOutcome.INFEASIBLE.label,
        )

    # 原样返回候选贷款（年限）
    best = BestCombination(ratio=best_ratio, interest=best_interest, loan=best_offer)
    logger.info("Best combination: ratio=%s interest=%.6f loan=%s", best.ratio, best.interest, best_offer.as_tuple())
    return SelectionResult(SearchOutcome.OK, best=best, skipped=skipped)


def compare_candidates(
    reference_loan: Any,
    candidates: Optional[Sequence[Any]],
    precision: float = RATIO_PRECISION,
) -> pd.DataFrame:
    """
    对比所有有效候选贷款。
    每行：年利率、年限、最优比例、平滑月供、总利息、等效年利率、是否最优
    """
    reference, offers, skipped, msg = _prepare(reference_loan, candidates, precision)
    if reference is None:
        logger.error("The provided parameters are not valid: %s", msg)
        return pd.DataFrame(columns=CANDIDATE_COMPARISON_COLUMNS)

    reference_term = reference.to_term()
    rows = []
    for offer, result in _evaluate_offers(reference, offers, skipped, precision):
        rows.append({
            "rate": offer.rate,
            "duration_years": offer.duration_years,
            "ratio": result.ratio,
            "monthly_payment": result.monthly_payment,
            "total_interest": result.total_interest,
            "equivalent_rate": equivalent_annual_rate(
                result.monthly_payment, TOTAL_AMOUNT, reference_term.duration_months,
            ),
            "is_best": False,
        })

    df = pd.DataFrame(rows, columns=CANDIDATE_COMPARISON_COLUMNS)
    if not df.empty:
        # 与 find_best_combination 一致：利息最低者比例为 0 时视为无可行组合
        best = df["total_interest"].idxmin()
        if df.loc[best, "ratio"] > 0:
            df.loc[best, "is_best"] = True
    return df
