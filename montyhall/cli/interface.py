import math
import time
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt
from rich.progress import track
from typing import Optional
from ..core.config import LabConfig
from ..core.game import Game
from ..core.round import RoundPhase
from ..core.scheduler import ManualScheduler
from ..simulation.batch_simulator import clamp_runs
from ..simulation.strategy import BatchStrategy, list_strategies


console = Console()


class InteractiveCLI:
    """Interactive command-line interface for the Monty Hall lab."""

    def __init__(self, config: Optional[LabConfig] = None):
        self.config = config or LabConfig()
        self.game = Game(self.config, scheduler=ManualScheduler())
        self.sim_strategy = BatchStrategy.SWITCH
        self.sim_runs = self.config.default_runs

    def display_doors(self):
        """Show the doors of the live round."""
        state = self.game.round.state
        in_result = state.phase == RoundPhase.RESULT

        table = Table(title="Doors")
        for door in state.doors:
            table.add_column(door.label, justify="center", style="cyan")

        cells = []
        for door in state.doors:
            is_open = door.id == state.host_door_id or (
                in_result and (door.id == state.final_door_id or door.has_prize)
            )
            if is_open:
                text = "[bold green]CAR[/bold green]" if door.has_prize else "[red]goat[/red]"
            else:
                text = "[ ? ]"
            tags = []
            if door.id == state.selected_door_id:
                tags.append("picked")
            if door.id == state.host_door_id:
                tags.append("host")
            if door.id == state.final_door_id:
                tags.append("final")
            if tags:
                text += f"\n[dim]{', '.join(tags)}[/dim]"
            cells.append(text)
        table.add_row(*cells)

        console.print(table)

    def display_status(self):
        console.print(Panel(self.game.round.status_message, title="Round status", border_style="blue"))

    def play_round(self):
        """Play a single round interactively."""
        if self.game.phase != RoundPhase.PICK:
            self.game.reset_round()

        self.display_status()
        self.display_doors()

        door_count = len(self.game.round.doors)
        while True:
            number = IntPrompt.ask(f"[cyan]Pick a door (1-{door_count})[/cyan]", default=1)
            if 1 <= number <= door_count:
                break
            console.print(f"[red]Please enter a value between 1 and {door_count}[/red]")
        self.game.select_door(number - 1)

        with console.status(f"[bold green]{self.game.round.status_message}"):
            time.sleep(self.config.reveal_delay)
            self.game.advance(self.config.reveal_delay)

        self.display_status()
        self.display_doors()

        choice = Prompt.ask("[cyan]Stay or switch?[/cyan]", choices=["stay", "switch"], default="switch")
        outcome = self.game.commit_strategy(choice)

        self.display_doors()
        if outcome.won:
            console.print(f"\n[bold green]{outcome}[/bold green]")
        else:
            console.print(f"\n[bold red]{outcome}[/bold red]")
        self.show_stats()

    def show_stats(self):
        """Display the cumulative strategy dashboard."""
        stats = self.game.current_stats()

        table = Table(title="Strategy stats dashboard")
        table.add_column("Strategy", style="cyan")
        table.add_column("Win Rate", style="green")
        table.add_column("Wins", style="yellow")
        table.add_column("Losses", style="magenta")
        table.add_column("Rounds", style="blue")

        table.add_row("Stay", stats.stay_win_rate, str(stats.stay_wins),
                      str(stats.stay_losses), str(stats.stay_total))
        table.add_row("Switch", stats.switch_win_rate, str(stats.switch_wins),
                      str(stats.switch_losses), str(stats.switch_total))

        console.print(table)
        console.print(f"[dim]Total rounds: {stats.overall} "
                      f"({stats.stay_total} stay, {stats.switch_total} switch)[/dim]")

    def show_simulation_results(self, snapshot):
        """Display the last batch."""
        table = Table(title=f"Simulation ({snapshot.runs:,} runs, strategy: {snapshot.strategy})")
        table.add_column("Strategy", style="cyan")
        table.add_column("Wins", style="yellow")
        table.add_column("Losses", style="magenta")
        table.add_column("Win Rate", style="green")

        table.add_row("Stay", str(snapshot.stay_wins), str(snapshot.stay_losses), snapshot.stay_win_rate)
        table.add_row("Switch", str(snapshot.switch_wins), str(snapshot.switch_losses), snapshot.switch_win_rate)

        console.print(table)

    def run_simulation(self, runs=None, strategy=None):
        """Run a batch with a progress bar and show the results."""
        runs = self.sim_runs if runs is None else runs
        strategy = self.sim_strategy if strategy is None else strategy

        simulator = self.game.simulator
        total = math.ceil(clamp_runs(runs, simulator.min_runs, simulator.max_runs) / simulator.chunk_size)
        chunks = simulator.iter_simulation(runs, strategy)
        for _ in track(chunks, total=total, description="Simulating..."):
            pass

        self.show_simulation_results(simulator.last_snapshot)
        self.show_stats()

    def configure_simulation(self):
        """Ask for run count and strategy, then simulate."""
        self.sim_runs = Prompt.ask(
            f"[cyan]Runs ({self.config.min_runs}-{self.config.max_runs})[/cyan]",
            default=str(self.sim_runs),
        )
        table = Table(title="Available Strategies")
        table.add_column("Name", style="cyan")
        table.add_column("Description", style="green")
        for strategy in BatchStrategy:
            table.add_row(strategy.value, strategy.description)
        console.print(table)

        self.sim_strategy = BatchStrategy(Prompt.ask(
            "[cyan]Strategy[/cyan]",
            choices=list_strategies(),
            default=self.sim_strategy.value,
        ))
        self.run_simulation()

    def run(self):
        """Main CLI loop."""
        console.print(Panel.fit(
            "[bold cyan]Monty Hall Live Lab[/bold cyan]\n"
            "Try the classic paradox and track whether switching really wins",
            border_style="blue"
        ))

        try:
            while True:
                choice = Prompt.ask(
                    "\n[cyan]What would you like to do?[/cyan]",
                    choices=["play", "simulate", "stats", "reset", "quit"],
                    default="play"
                )

                if choice == "play":
                    self.play_round()
                elif choice == "simulate":
                    self.configure_simulation()
                elif choice == "stats":
                    self.show_stats()
                elif choice == "reset":
                    self.game.reset_round()
                    console.print("[green]New round ready.[/green]")
                elif choice == "quit":
                    console.print("[yellow]Thanks for playing![/yellow]")
                    break
        finally:
            self.game.close()
