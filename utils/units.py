from config.settings import MONTHS_PER_YEAR


def years_to_months(years: float) -> float:
    """年限换算为月数：25 -> 300，10.3 -> 123.6（不取整）"""
    return years * MONTHS_PER_YEAR


def months_to_years(months: float) -> float:
    """月数换算为年限：300 -> 25.0"""
    return months / MONTHS_PER_YEAR
