from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from rentadjust.analysis.batch import evaluate_scenarios_df, read_scenarios_csv, summarize_batch
from rentadjust.services.rent_calculator import analyze_rent

app = typer.Typer(help="Rent adjustment calculator (cash rent + deposit equivalent).")


@app.command()
def calculate(
    effective_rate: str = typer.Option("", "--effective-rate", help="Effective annual rate in percent, e.g. 37"),
    last_year_rent: str = typer.Option("", "--last-year-rent", help="Previous monthly cash rent"),
    last_year_mortgage: str = typer.Option("", "--last-year-mortgage", help="Previous deposit (rahn)"),
    next_year_mortgage: str = typer.Option("", "--next-year-mortgage", help="Next deposit (rahn)"),
    next_year_rent: str = typer.Option("", "--next-year-rent", help="Next monthly cash rent -> percent increase"),
    increase_percent: str = typer.Option(
        "", "--increase-percent", help="Desired total-rent increase in percent -> required next rent"
    ),
    digits: Optional[str] = typer.Option(
        None, "--digits", help="Display digits: fa | ascii (default: RENTADJUST_DISPLAY_DIGITS)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    """
    Compute one rent adjustment. Give exactly one of --next-year-rent or
    --increase-percent. Numerals may use Persian digits and separators.
    """
    if digits is not None and digits not in ("fa", "ascii"):
        raise typer.BadParameter("must be 'fa' or 'ascii'", param_hint="--digits")

    payload = {
        "lastYearRent": last_year_rent,
        "lastYearMortgage": last_year_mortgage,
        "nextYearMortgage": next_year_mortgage,
        "effectiveRate": effective_rate,
        "nextYearRent": next_year_rent,
        "rentIncreasePercent": increase_percent,
    }
    try:
        out = analyze_rent(payload, digits=digits)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        for line in out["messages"]:
            typer.echo(line["message"])

    if not out["ok"]:
        raise typer.Exit(code=1)


@app.command()
def batch(
    input_csv: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV with one scenario per row"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write results CSV here (default: stdout)"),
) -> None:
    """
    Evaluate every row of a scenarios CSV. Input columns are carried through
    next to the result columns.
    """
    df = read_scenarios_csv(input_csv)
    logger.info("Evaluating scenarios", path=str(input_csv), rows=len(df))

    results = evaluate_scenarios_df(df)
    merged = df.join(results, rsuffix="_result")

    summary = summarize_batch(results)
    logger.info("Batch completed", **summary)

    if output is not None:
        merged.to_csv(output, index=False, encoding="utf-8")
        logger.info("Results written", output=str(output))
    else:
        typer.echo(merged.to_csv(index=False), nl=False)


if __name__ == "__main__":
    app()
