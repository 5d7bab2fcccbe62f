import os

# 名义借款总额：按 100 计，比例即百分比
TOTAL_AMOUNT = 100

# 比例搜索步长（同时作为 0% / 100% 边界的下限）
RATIO_PRECISION = 0.0001

# 比例曲线（报表/图表）采样步长
PROFILE_STEP = 0.1

MONTHS_PER_YEAR = 12

# 默认参照贷款 (年利率, 年限)
DEFAULT_REFERENCE_LOAN = (0.044, 25)

# 演示用短期贷款报价 (年利率, 年限)
DEMO_CANDIDATE_SETS = {
    "combination1": [(0.029, 10), (0.032, 12), (0.035, 15), (0.038, 20), (0.038, 22), (0.044, 25)],
    "combination2": [(0.022, 19), (0.023, 20), (0.028, 22), (0.031, 24)],
    "combination4": [(0.022, 1)],
    "failingCombination1": [(0.029, None), (0.032, 12), (0.035, 15), (0.038, 20), (0.038, 22), (0.044, 25)],
    "failingCombination2": [],
}

# 直接比例搜索示例：[0.0115, 180 个月] & [0.018, 300 个月]
DEMO_RATIO_CASE = (0.0115, 180, 0.018, 300)

# 日志
LOG_LEVEL = os.environ.get("LOAN_SPLIT_LOG_LEVEL", "WARNING")
LOG_SERVICE_NAME = "loan-split"

# 页面配置
PAGE_TITLE = "贷款组合优化"
PAGE_ICON = "🏦"
LAYOUT = "wide"

# 图表配色
COLORS = {
    "primary": "#1f77b4",
    "success": "#2ca02c",
    "danger": "#d62728",
    "short": "#ff7f0e",
    "long": "#1f77b4",
    "feasible": "#2ca02c",
}
