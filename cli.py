import click

from config.settings import (
    DEFAULT_REFERENCE_LOAN,
    DEMO_CANDIDATE_SETS,
    DEMO_RATIO_CASE,
    LOG_LEVEL,
    PROFILE_STEP,
    RATIO_PRECISION,
)
from core.amortization import amortization_totals
from core.exceptions import InvalidLoanInputError
from core.ratio_search import find_best_ratio, ratio_profile
from core.selection import compare_candidates, find_best_combination
from utils.formatters import fmt_amount, fmt_rate, fmt_ratio
from utils.logging_setup import setup_logging
from utils.units import years_to_months


def _parse_number(text):
    text = text.strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_loan(value: str):
    """'0.044,25' -> (0.044, 25.0)。无法解析的部分记为 None，交给校验层处理"""
    parts = value.split(",")
    if len(parts) != 2:
        return tuple(_parse_number(p) for p in parts)
    return _parse_number(parts[0]), _parse_number(parts[1])


def _echo_selection(result):
    if result.skipped:
        for item in result.skipped:
            click.echo(f"Skipped candidate #{item.index} {item.raw!r}: {item.reason}")
    if not result.ok:
        click.echo(f"No result: {result.outcome.value} {result.message}".rstrip())
        return
    best = result.best
    click.echo(f"Ratio: {fmt_ratio(best.ratio)}")
    click.echo(f"Interest: {best.interest:.6f}")
    click.echo(f"Loan: rate={fmt_rate(best.loan.rate)} years={best.loan.duration_years:g}")


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=LOG_LEVEL, show_default=True, help='Logging level')
@click.option('--json-logs', is_flag=True, help='Emit logs as JSON')
def cli(log_level, json_logs):
    """Finds the lowest-interest split between a short-term and a long-term loan."""
    setup_logging(log_level, json_logs)

@cli.command()
@click.option('--principal', type=float, required=True, help='Loan principal')
@click.option('--rate', type=float, required=True, help='Annual interest rate (decimal, e.g. 0.044)')
@click.option('--years', type=float, required=True, help='Loan term in years')
def payment(principal, rate, years):
    """Calculates the monthly payment and total interest for an amortized loan."""
    try:
        monthly, interest = amortization_totals(principal, rate, years_to_months(years))
    except InvalidLoanInputError as e:
        raise click.BadParameter(str(e))
    click.echo(f"Monthly payment: {fmt_amount(monthly)}")
    click.echo(f"Total interest: {fmt_amount(interest)}")

@cli.command()
@click.option('--short-rate', type=float, required=True, help='Short-term loan annual rate')
@click.option('--short-months', type=int, required=True, help='Short-term loan duration in months')
@click.option('--long-rate', type=float, required=True, help='Long-term loan annual rate')
@click.option('--long-months', type=int, required=True, help='Long-term loan duration in months')
@click.option('--precision', type=float, default=RATIO_PRECISION, show_default=True, help='Scan step (percent)')
@click.pass_context
def ratio(ctx, short_rate, short_months, long_rate, long_months, precision):
    """Finds the best short-term borrowing ratio for a pair of loans."""
    best = find_best_ratio(short_rate, short_months, long_rate, long_months, precision=precision)
    if best is None:
        click.echo("No result: invalid_input")
        ctx.exit(1)
    if best == 0:
        click.echo("No feasible ratio: the long-term payment cannot cover its interest.")
        return
    click.echo(f"Best short-term ratio: {fmt_ratio(best)}")

@cli.command()
@click.option('--reference', type=str, default=','.join(str(v) for v in DEFAULT_REFERENCE_LOAN),
              show_default=True, help='Reference loan as RATE,YEARS')
@click.option('--candidate', 'candidates', type=str, multiple=True, required=True,
              help='Candidate short-term loan as RATE,YEARS (repeatable)')
@click.option('--precision', type=float, default=RATIO_PRECISION, show_default=True, help='Scan step (percent)')
@click.pass_context
def best(ctx, reference, candidates, precision):
    """Finds the candidate loan whose combination with the reference loan costs the least interest."""
    result = find_best_combination(
        parse_loan(reference), [parse_loan(c) for c in candidates], precision=precision,
    )
    _echo_selection(result)
    if not result.ok:
        ctx.exit(1)

@cli.command()
@click.option('--reference', type=str, default=','.join(str(v) for v in DEFAULT_REFERENCE_LOAN),
              show_default=True, help='Reference loan as RATE,YEARS')
@click.option('--candidate', 'candidates', type=str, multiple=True, required=True,
              help='Candidate short-term loan as RATE,YEARS (repeatable)')
@click.option('--precision', type=float, default=RATIO_PRECISION, show_default=True, help='Scan step (percent)')
def compare(reference, candidates, precision):
    """Compares every valid candidate against the reference loan."""
    comp_df = compare_candidates(
        parse_loan(reference), [parse_loan(c) for c in candidates], precision=precision,
    )
    if comp_df.empty:
        click.echo("No valid candidates to compare.")
        return
    click.echo("--- Candidate Comparison ---")
    click.echo(comp_df.to_string(index=False))

@cli.command()
@click.option('--short-rate', type=float, required=True, help='Short-term loan annual rate')
@click.option('--short-months', type=int, required=True, help='Short-term loan duration in months')
@click.option('--long-rate', type=float, required=True, help='Long-term loan annual rate')
@click.option('--long-months', type=int, required=True, help='Long-term loan duration in months')
@click.option('--step', type=float, default=PROFILE_STEP, show_default=True, help='Sampling step (percent)')
def profile(short_rate, short_months, long_rate, long_months, step):
    """Outputs the ratio scan (payments and feasibility per ratio) as CSV."""
    df = ratio_profile(short_rate, short_months, long_rate, long_months, step=step)
    click.echo(df.to_csv(index=False))

@cli.command()
def demo():
    """Runs the built-in reference scenarios."""
    for name, candidates in DEMO_CANDIDATE_SETS.items():
        click.echo(f'From "{name}" best combination for the given loan {DEFAULT_REFERENCE_LOAN} is:')
        _echo_selection(find_best_combination(DEFAULT_REFERENCE_LOAN, candidates))
        click.echo("\n----------------------------------\n")

    click.echo("Wrong given loan:")
    _echo_selection(find_best_combination([], DEMO_CANDIDATE_SETS["combination1"]))
    click.echo("\n----------------------------------\n")

    click.echo(f"RATIO - {list(DEMO_RATIO_CASE[:2])} & {list(DEMO_RATIO_CASE[2:])}")
    click.echo(f"Best short-term ratio: {fmt_ratio(find_best_ratio(*DEMO_RATIO_CASE))}")

if __name__ == "__main__":
    cli()
