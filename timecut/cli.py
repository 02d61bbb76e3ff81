#!filepath: timecut/cli.py
import math
from typing import Optional

import typer
from rich import print
from rich.table import Table

from timecut import __version__, logs
from timecut.config import AppConfig, SchedulerConfig
from timecut.core import Behavior, Cut, Scheduler, Track, blend

app = typer.Typer(help="timecut scheduling CLI")


def build_demo_tracks():
    """
    Two tracks:
      - a sine wave over [0, 2), blending whatever comes next additively
      - a constant pulse over [0.5, 1.5)
    """
    wave = Behavior.from_fn(lambda t: math.sin(2 * math.pi * t))
    pulse = Behavior.constant(0.25)

    return [
        Track([Cut(0.0, 2.0, wave, blend=blend.add)]),
        Track([Cut(0.5, 1.5, pulse)]),
    ]


@app.command()
def version():
    print(f"timecut v{__version__}")


@app.command()
def demo(
    config: Optional[str] = typer.Option(None, help="Path to a YAML config"),
    delta: Optional[float] = typer.Option(None, help="Override the step size"),
):
    """
    Run the built-in two-track schedule and print every step.
    """
    cfg = AppConfig.load(path=config)
    if delta is not None:
        cfg.scheduler = SchedulerConfig(**{**cfg.scheduler.model_dump(), "delta": delta})
    logs.configure(cfg.log)

    scheduler = Scheduler.from_config(build_demo_tracks(), cfg.scheduler)

    table = Table(title="timecut demo")
    table.add_column("t", justify="right")
    table.add_column("value", justify="right")

    def _row(t, value):
        table.add_row(f"{t:.3f}", "-" if value is None else f"{value:.4f}")

    report = scheduler.schedule(on_value=_row)

    print(table)
    print(f"[green]steps={report.steps} interrupted={report.interrupted}[/green]")


if __name__ == "__main__":
    app()

# python -m timecut.cli demo --delta 0.25
