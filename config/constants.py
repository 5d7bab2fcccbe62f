from enum import Enum


class SearchOutcome(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"  # 参数无效
    INFEASIBLE = "infeasible"  # 无可行组合

    @property
    def label(self) -> str:
        return {
            "ok": "找到最优组合",
            "invalid_input": "参数无效",
            "infeasible": "无可行组合",
        }[self.value]


class Tranche(str, Enum):
    SHORT = "short"
    LONG = "long"

    @property
    def label(self) -> str:
        return {
            "short": "短期贷款",
            "long": "长期贷款",
        }[self.value]


# 列定义
RATIO_PROFILE_COLUMNS = [
    "ratio", "smoothed_payment", "short_payment", "long_payment",
    "min_long_payment", "feasible",
]

CANDIDATE_COMPARISON_COLUMNS = [
    "rate", "duration_years", "ratio", "monthly_payment",
    "total_interest", "equivalent_rate", "is_best",
]
