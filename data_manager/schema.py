from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from config.constants import SearchOutcome
from utils.units import months_to_years, years_to_months


@dataclass(frozen=True)
class LoanTerm:
    rate: float  # 年利率，小数形式 0.044
    duration_months: float  # 由年限换算，可为小数

    @property
    def duration_years(self) -> float:
        return months_to_years(self.duration_months)


@dataclass(frozen=True)
class LoanOffer:
    rate: float
    duration_years: float

    def to_term(self) -> LoanTerm:
        return LoanTerm(self.rate, years_to_months(self.duration_years))

    @classmethod
    def from_term(cls, term: LoanTerm) -> "LoanOffer":
        return cls(term.rate, term.duration_years)

    def as_tuple(self) -> Tuple[float, float]:
        return self.rate, self.duration_years


@dataclass(frozen=True)
class BlendResult:
    ratio: float  # 短期贷款占比 (%)
    monthly_payment: float
    total_interest: float


@dataclass(frozen=True)
class BestCombination:
    ratio: float
    interest: float
    loan: LoanOffer


@dataclass(frozen=True)
class SkippedCandidate:
    index: int
    raw: Any
    reason: str


@dataclass
class SelectionResult:
    outcome: SearchOutcome
    best: Optional[BestCombination] = None
    skipped: List[SkippedCandidate] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == SearchOutcome.OK
