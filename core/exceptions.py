"""计算层异常"""


class LoanCalculationError(Exception):
    """贷款计算异常基类"""

    pass


class InvalidLoanInputError(LoanCalculationError, ValueError):
    """利率或期限缺失、为零或为负"""

    pass


class NegativeInterestError(LoanCalculationError):
    """总利息为负：计算或输入有误"""

    pass
