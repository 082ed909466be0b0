#!filepath: bb_machine/cli.py
from typing import Optional

import typer
from rich import print

from bb_machine import __version__
from bb_machine.config import AppConfig
from bb_machine.rules.program import parse_program
from bb_machine.utils.errors import MachineError
from bb_machine.utils.logger import init_logging

app = typer.Typer(help="bb-machine Turing machine runner")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
    program: str = typer.Argument(..., help='Program in standard notation, e.g. "1RB1LB_1LA1RZ"'),
    max_steps: Optional[int] = typer.Option(None, "--max-steps", min=1, help="Give up after N steps"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML config path"),
):
    """
    运行一个程序（空白纸带），输出步数与非空白格数
    """
    try:
        cfg = AppConfig.load(config)
        init_logging(cfg.log)

        machine = parse_program(program).machine(config=cfg.machine)
        machine.run(max_steps=max_steps)
    except (MachineError, ValueError, FileNotFoundError) as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    print(f"[green]Steps: {machine.total_steps()}[/green]")
    print(f"[green]Non-blank count: {machine.count_non_blank()}[/green]")


if __name__ == "__main__":
    app()

# python -m bb_machine.cli run 1RB1LB_1LA1RZ
