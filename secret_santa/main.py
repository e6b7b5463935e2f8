"""CLI entry point for the Secret Santa draw."""

import random
from pathlib import Path
from typing import Annotated, Optional

import typer

from secret_santa.data_loader import load_config
from secret_santa.draw import SecretSantaDraw
from secret_santa.feasibility import check_feasibility
from secret_santa.logger import setup_logging
from secret_santa.output import export_pairing_to_csv, print_draw_summary

app = typer.Typer(
    help="Draw Secret Santa pairings that respect giver -> receiver exclusions"
)


@app.command()
def main(
    config_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the config file (.json with participants/exclusions, or .csv: participant, excluded receivers...)"
        ),
    ],
    seed: Annotated[
        Optional[int],
        typer.Option("-s", "--seed", help="Random seed for a reproducible draw"),
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("-o", "--output", help="Export the pairing to CSV")
    ] = None,
    check_only: Annotated[
        bool,
        typer.Option(
            "--check-only",
            help="Only check whether any valid pairing exists (ILP, no enumeration)",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level", envvar="SECRET_SANTA_LOG_LEVEL", help="Log level for stderr"
        ),
    ] = "WARNING",
) -> None:
    """Run the Secret Santa draw."""
    setup_logging(log_level)

    if not config_file.exists():
        typer.echo(f"Error: File not found: {config_file}", err=True)
        raise typer.Exit(1)

    try:
        config = load_config(config_file)
    except ValueError as e:
        typer.echo(f"Error loading config file: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(
        f"Loaded {len(config.participants)} participants and "
        f"{len(config.exclusions)} exclusion rules from {config_file}\n"
    )

    draw = SecretSantaDraw(config.participants, config.exclusions)

    if check_only:
        status = check_feasibility(draw.participants, draw.exclusion_index)
        typer.echo(f"Feasibility: {status.value}")
        return

    rng = random.Random(seed) if seed is not None else None
    result = draw.run(rng=rng)

    print_draw_summary(result)

    if output and result.pairs:
        export_pairing_to_csv(result, str(output))
        typer.echo(f"\nPairing exported to: {output}")


if __name__ == "__main__":
    app()
