import logging
import click
from rich.logging import RichHandler
from ..core.config import LabConfig
from ..simulation.strategy import list_strategies
from .interface import InteractiveCLI, console


@click.command()
@click.option('--simulate', '-s', is_flag=True, help='Run a batch simulation instead of playing')
@click.option('--runs', '-r', type=int, help='Number of rounds to simulate (1-50000)')
@click.option('--strategy', type=click.Choice(list_strategies()), default='switch',
              show_default=True, help='Strategy used for simulated rounds')
@click.option('--seed', type=int, help='Seed for reproducible doors and picks')
@click.option('--reveal-delay', type=float, default=0.9, show_default=True,
              help='Seconds the host takes to open a door')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def main(simulate, runs, strategy, seed, reveal_delay, verbose):
    """Monty Hall Live Lab - play rounds and measure stay vs switch."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = LabConfig(seed=seed, reveal_delay=reveal_delay)
    except ValueError as e:
        raise click.BadParameter(str(e))
    cli = InteractiveCLI(config)

    if simulate:
        cli.run_simulation(runs=runs, strategy=strategy)
    else:
        cli.run()


if __name__ == "__main__":
    main()
