from utils.formatters import fmt_amount, fmt_rate, fmt_ratio, fmt_months


def test_fmt_amount():
    assert fmt_amount(1234567.891) == "1,234,567.89"
    assert fmt_amount(12.5, "元") == "12.50 元"


def test_fmt_rate():
    assert fmt_rate(0.044) == "4.40%"


def test_fmt_ratio():
    assert fmt_ratio(51.4923) == "51.4923%"


def test_fmt_months():
    assert fmt_months(300) == "25年"
    assert fmt_months(18) == "1年6个月"
    assert fmt_months(6) == "6个月"
