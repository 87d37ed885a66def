#!/usr/bin/env python
"""
Print the abscissas and weights of a Gaussian quadrature rule.
"""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from quadrature_engine import (
    QuadratureError,
    QuadratureFamily,
    generate,
)

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()


@app.command()
def main(
    family: QuadratureFamily = typer.Argument(
        ..., help="Polynomial family", case_sensitive=False
    ),
    n: int = typer.Argument(..., help="Number of quadrature points"),
    alpha: float | None = typer.Option(
        None, "-a", "--alpha", help="Laguerre/Jacobi alpha"
    ),
    beta: float | None = typer.Option(
        None, "-b", "--beta", help="Jacobi beta"
    ),
) -> None:
    """Generate a Gaussian quadrature rule and print it as a table."""

    shape_parameters: list[float] = []
    if alpha is not None or beta is not None:
        shape_parameters.append(alpha if alpha is not None else 0.0)
    if beta is not None:
        shape_parameters.append(beta)

    try:
        rule = generate(family, shape_parameters, n)
    except (QuadratureError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    console.print(
        Panel(
            f"[bold]Gauss-{family.value.capitalize()} Rule[/bold]\n\n"
            f"Points: [cyan]{n}[/cyan]\n"
            f"Shape parameters: [cyan]{tuple(shape_parameters)}[/cyan]",
            title="Configuration",
        )
    )

    table = Table(title="Abscissas and weights")
    table.add_column("i", justify="right")
    table.add_column("abscissa", justify="right")
    table.add_column("weight", justify="right")
    for i, (x, w) in enumerate(zip(rule.abscissas, rule.weights)):
        table.add_row(str(i), f"{x:.15g}", f"{w:.15g}")
    console.print(table)


if __name__ == "__main__":
    app()
