def fmt_amount(value: float, unit: str = "") -> str:
    """格式化金额：1234567.891 -> 1,234,567.89"""
    text = f"{value:,.2f}"
    return f"{text} {unit}" if unit else text


def fmt_rate(value: float) -> str:
    """格式化小数利率：0.044 -> 4.40%"""
    return f"{value * 100:.2f}%"


def fmt_ratio(value: float) -> str:
    """格式化借款比例（已是百分数）：51.4923 -> 51.4923%"""
    return f"{value:.4f}%"


def fmt_months(months: int) -> str:
    """格式化月数为年月：300 -> 25年，18 -> 1年6个月"""
    years = months // 12
    remain = months % 12
    if remain == 0:
        return f"{years}年"
    if years == 0:
        return f"{remain}个月"
    return f"{years}年{remain}个月"
