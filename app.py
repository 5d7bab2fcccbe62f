"""贷款组合优化 Dashboard - 主入口"""
import pandas as pd
import streamlit as st

from config.settings import (
    DEFAULT_REFERENCE_LOAN, DEMO_CANDIDATE_SETS, LAYOUT, PAGE_ICON, PAGE_TITLE, PROFILE_STEP,
)
from components.charts import create_candidate_interest_bar, create_ratio_profile_chart
from core.ratio_search import ratio_profile
from core.selection import compare_candidates, find_best_combination
from utils.formatters import fmt_amount, fmt_months, fmt_rate, fmt_ratio
from utils.logging_setup import setup_logging
from utils.units import years_to_months

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded",
)
setup_logging()

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

with st.sidebar:
    st.markdown("### 参照贷款（长期）")
    ref_rate = st.number_input("年利率", value=float(DEFAULT_REFERENCE_LOAN[0]), step=0.001, format="%.4f")
    ref_years = st.number_input("年限", value=float(DEFAULT_REFERENCE_LOAN[1]), step=1.0, min_value=1.0)

st.subheader("短期贷款报价")
candidates_df = st.data_editor(
    pd.DataFrame(DEMO_CANDIDATE_SETS["combination1"], columns=["rate", "duration_years"]),
    num_rows="dynamic",
    width="stretch",
)
candidates = [
    (None if pd.isna(r) else float(r), None if pd.isna(y) else float(y))
    for r, y in candidates_df[["rate", "duration_years"]].itertuples(index=False)
]

reference = (ref_rate, ref_years)
result = find_best_combination(reference, candidates)

for item in result.skipped:
    st.warning(f"第 {item.index + 1} 行已忽略：{item.reason}")

if not result.ok:
    st.error(f"{result.outcome.label}：{result.message}")
    st.stop()

best = result.best
c1, c2, c3 = st.columns(3)
with c1:
    st.metric("短期贷款占比", fmt_ratio(best.ratio))
with c2:
    st.metric("总利息（每 100 元）", fmt_amount(best.interest))
with c3:
    st.metric("最优短期贷款", f"{fmt_rate(best.loan.rate)} / {fmt_months(int(round(years_to_months(best.loan.duration_years))))}")

st.divider()

comp_df = compare_candidates(reference, candidates)
col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(create_candidate_interest_bar(comp_df), width="stretch")
with col2:
    profile = ratio_profile(
        best.loan.rate, years_to_months(best.loan.duration_years),
        ref_rate, years_to_months(ref_years), step=PROFILE_STEP,
    )
    st.plotly_chart(create_ratio_profile_chart(profile, best.ratio), width="stretch")

st.dataframe(comp_df, width="stretch")
