"""Plotly 图表工厂"""
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import plotly.io as pio

from config.constants import Tranche
from config.settings import COLORS

# 自定义 Plotly 主题
pio.templates["loan_split_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=20, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        yaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        legend=dict(bgcolor="rgba(255,255,255,0.5)", bordercolor="#e0e0e0", borderwidth=1),
        colorway=px.colors.qualitative.Plotly,
    )
)
pio.templates.default = "loan_split_light"


def create_ratio_profile_chart(profile: pd.DataFrame, best_ratio: Optional[float] = None) -> go.Figure:
    """比例扫描曲线：短期月供、长期月供、覆盖利息所需最低月供"""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=profile["ratio"], y=profile["short_payment"],
        name=Tranche.SHORT.label, line=dict(color=COLORS["short"]),
    ))
    fig.add_trace(go.Scatter(
        x=profile["ratio"], y=profile["long_payment"],
        name=Tranche.LONG.label, line=dict(color=COLORS["long"]),
    ))
    fig.add_trace(go.Scatter(
        x=profile["ratio"], y=profile["min_long_payment"],
        name="覆盖利息最低月供", line=dict(color=COLORS["danger"], dash="dash"),
    ))

    feasible = profile[profile["feasible"]]
    if not feasible.empty:
        # 可行区间
        fig.add_vrect(
            x0=feasible["ratio"].min(), x1=feasible["ratio"].max(),
            fillcolor=COLORS["feasible"], opacity=0.08, line_width=0,
        )
    if best_ratio:
        fig.add_vline(x=best_ratio, line=dict(color=COLORS["success"], dash="dot"),
                      annotation_text=f"最优 {best_ratio:.4f}%")

    fig.update_layout(
        title="短期贷款占比扫描",
        xaxis_title="短期贷款占比 (%)",
        yaxis_title="月供（每 100 元借款）",
        hovermode="x unified",
    )
    return fig


def create_candidate_interest_bar(comparison: pd.DataFrame) -> go.Figure:
    """各候选贷款组合后的总利息"""
    df = comparison.copy()
    df["label"] = df.apply(lambda r: f"{r['rate'] * 100:.2f}% / {r['duration_years']:g}年", axis=1)
    colors = [COLORS["success"] if b else COLORS["primary"] for b in df["is_best"]]

    fig = go.Figure(go.Bar(
        x=df["label"], y=df["total_interest"],
        marker_color=colors,
        text=df["ratio"].map(lambda v: f"{v:.2f}%"),
        textposition="outside",
    ))
    fig.update_layout(
        title="候选贷款组合总利息",
        xaxis_title="短期贷款 (年利率 / 年限)",
        yaxis_title="总利息（每 100 元借款）",
    )
    return fig
