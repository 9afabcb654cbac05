#!/usr/bin/env python
"""Pass-the-device Who? game in the terminal.

Usage:
    whogame                                  # 3 default players, Normal mode
    whogame --names Ann Bob Cem Dia          # Custom roster
    whogame --modes jester breakingPoint --names A B C D E
    whogame --modes normal twoWords --randomize
    whogame --timer 180                      # Discussion countdown
    whogame --store whogame.yaml             # Load and save roster/settings
    whogame --games 1000                     # Stress test with round audits
"""

import argparse
import asyncio
import logging
import random
from collections import Counter
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from whogame.models import (
    DEFAULT_CATEGORIES,
    GameMode,
    Player,
    RoundPhase,
    Settings,
    TimerSettings,
    WordPool,
)
from whogame.engine import CardView, DiscussionTimer, GameSession, RoundResults
from whogame.persistence import GameSnapshot, YamlFileStore, load_snapshot, save_snapshot
from whogame.roster import roster_from_names
from whogame.validation import ValidationError, validate_round_state

logger = logging.getLogger(__name__)


# ============================================================================
# Rendering
# ============================================================================

def render_card(card: CardView) -> Panel:
    """Render one player's card."""
    if card.is_jester:
        body = "[bold yellow]JESTER[/bold yellow]\nGet yourself voted out!"
        if card.hint:
            body += f"\n\nHint: [bold]{card.hint}[/bold]"
        return Panel(body, title=card.player_name, border_style="yellow")

    if card.is_impostor:
        body = "[bold red]IMPOSTOR[/bold red]"
        if card.hint:
            body += f"\n\nHint: [bold]{card.hint}[/bold]"
        return Panel(body, title=card.player_name, border_style="red")

    lines = []
    if card.is_detective:
        lines.append("[bold blue]DETECTIVE[/bold blue] - your vote counts double")
    if card.is_healer:
        lines.append("[bold green]HEALER[/bold green] - you can revive someone once")
    lines.append(f"[bold]{card.content}[/bold]")
    if card.content2:
        lines.append(f"[bold]{card.content2}[/bold]")
    if card.hint and card.show_hint_to_innocents:
        lines.append(f"Hint: {card.hint}")
    return Panel("\n".join(lines), title=card.player_name, border_style="cyan")


def render_results(results: RoundResults) -> Table:
    """Render the results screen as a table."""
    table = Table(title="Results", show_header=False)
    table.add_row("Mode", " + ".join(results.mode_labels))
    word = results.word if results.word2 is None else f"{results.word} / {results.word2}"
    table.add_row("The word was", f"[bold]{word}[/bold]")
    if results.hint:
        table.add_row("Hint", results.hint)
    table.add_row(
        "Impostor(s)",
        ", ".join(f"[{p.color}]{p.name}[/{p.color}]" for p in results.impostors) or "-",
    )
    for label, summary in (
        ("Jester", results.jester),
        ("Detective", results.detective),
        ("Healer", results.healer),
    ):
        if summary is not None:
            table.add_row(label, f"[{summary.color}]{summary.name}[/{summary.color}]")
    if results.vote_counts:
        table.add_row(
            "Votes",
            ", ".join(f"{vc.player.name}: {vc.votes}" for vc in results.vote_counts),
        )
    return table


# ============================================================================
# Interactive game
# ============================================================================

async def ask(prompt: str, **kwargs) -> str:
    """Prompt without blocking the event loop (the countdown keeps ticking)."""
    return await asyncio.to_thread(Prompt.ask, prompt, **kwargs)


async def confirm(prompt: str, default: bool = True) -> bool:
    return await asyncio.to_thread(Confirm.ask, prompt, default=default)


def make_timer_factory(console: Console):
    """Countdown that announces every full minute and the end of time."""

    def on_tick(remaining: int) -> None:
        if remaining and remaining % 60 == 0:
            console.print(f"[dim]{DiscussionTimer.format_remaining(remaining)} left[/dim]")

    def on_expire() -> None:
        console.print("[bold red]Time's up! Go vote.[/bold red]")

    def factory(length_seconds: int) -> DiscussionTimer:
        return DiscussionTimer(length_seconds, on_tick=on_tick, on_expire=on_expire)

    return factory


def vote_choices(players: list[Player]) -> dict[str, Player]:
    """Map seat numbers, starting at 1, to players. Names may repeat; seats do not."""
    return {str(seat): p for seat, p in enumerate(players, start=1)}


async def play_round(session: GameSession, console: Console) -> None:
    """Run one round from card viewing through results."""
    while session.phase == RoundPhase.VIEWING_CARDS:
        player = session.current_player
        console.clear()
        console.print(f"Pass the device to [bold]{player.name}[/bold].")
        await ask("Press Enter to look at your card", default="", show_default=False)
        console.print(render_card(session.current_card()))
        session.mark_card_viewed()
        await ask("Press Enter to hide it", default="", show_default=False)
        console.clear()
        session.advance()

    console.print(Panel("Discuss who the impostor is!", title="Discussion"))
    if session.settings.timer.enabled:
        console.print(
            f"Timer: {DiscussionTimer.format_remaining(session.settings.timer.length_seconds)}"
        )

    if await confirm("Record votes?", default=True):
        seats = vote_choices(session.players)
        console.print("\n".join(f"{seat}. {p.name}" for seat, p in seats.items()))
        for voter in session.players:
            seat = await ask(f"{voter.name} votes for seat", choices=list(seats))
            session.cast_vote(voter.id, seats[seat].id)
    else:
        await ask("Press Enter to reveal the results", default="", show_default=False)

    session.end_game()
    console.print(render_results(session.results()))


async def run_interactive(session: GameSession, console: Console) -> None:
    """Lobby loop: start, play again, return to lobby or quit."""
    try:
        while True:
            console.print(Panel(
                "\n".join(f"[{p.color}]●[/{p.color}] {p.name}" for p in session.players)
                + f"\n\nCategories: {', '.join(session.selected_categories)}"
                + f"\nModes: {', '.join(sorted(m.value for m in session.settings.enabled_modes))}",
                title="Lobby",
            ))
            try:
                session.start_game()
            except ValidationError as e:
                console.print(f"[red]{e.message}[/red]")
                return

            await play_round(session, console)

            choice = await ask("Next", choices=["again", "lobby", "quit"], default="again")
            if choice == "quit":
                return
            if choice == "lobby":
                session.reset_game()
    finally:
        session.close()


# ============================================================================
# Stress test
# ============================================================================

def random_settings(rng: random.Random, player_count: int) -> Settings:
    """Random, mostly valid settings for a roster size."""
    modes = list(GameMode)
    enabled = set(rng.sample(modes, rng.randint(1, 3)))
    return Settings(
        enabled_modes=enabled,
        randomize=rng.random() < 0.5,
        number_of_impostors=rng.randint(1, max(1, player_count - 1)),
        hint_enabled=rng.random() < 0.8,
        timer=TimerSettings(enabled=False),
    )


def run_single_round(seed: int) -> dict:
    """Play one random round to the results and audit it."""
    rng = random.Random(seed)
    players = roster_from_names([f"P{i}" for i in range(rng.randint(2, 10))], rng)
    settings = random_settings(rng, len(players))
    pool = WordPool(DEFAULT_CATEGORIES)
    selected = rng.sample(pool.names, rng.randint(1, len(pool.names)))
    session = GameSession(players, settings=settings, selected_categories=selected, rng=rng)

    try:
        session.start_game()
    except ValidationError as e:
        return {"seed": seed, "rejected": e.code, "modes": [], "violations": []}

    violations = validate_round_state(session.state, session.players, settings.number_of_impostors)
    while session.phase == RoundPhase.VIEWING_CARDS:
        session.mark_card_viewed()
        session.advance()
    for voter in session.players:
        session.cast_vote(voter.id, rng.choice(session.players).id)
    violations += validate_round_state(session.state, session.players, settings.number_of_impostors)
    session.end_game()
    session.results()
    session.reset_game()
    violations += validate_round_state(session.state, session.players)

    return {
        "seed": seed,
        "rejected": None,
        "modes": sorted(m.value for m in settings.enabled_modes),
        "violations": [(v.rule_id, v.describe()) for v in violations],
    }


def run_stress_test(num_games: int, seed_base: Optional[int] = None) -> int:
    """Run many random rounds and report rejections and violations.

    Returns:
        Number of rounds with violations.
    """
    console = Console()
    if seed_base is None:
        seed_base = random.randint(1, 1000000)

    console.print(f"\n[bold]Running stress test: {num_games} rounds...[/bold]")
    console.print(f"Seed base: {seed_base}")

    rejected: Counter = Counter()
    violations: Counter = Counter()
    failing_seeds: list[int] = []
    completed = 0

    for game_num in range(num_games):
        result = run_single_round(seed_base + game_num)
        if result["rejected"]:
            rejected[result["rejected"]] += 1
            continue
        completed += 1
        if result["violations"]:
            failing_seeds.append(result["seed"])
            for rule_id, _ in result["violations"]:
                violations[rule_id] += 1

    table = Table(title="Stress Test Report")
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    table.add_row("Rounds", str(num_games))
    table.add_row("Completed", str(completed))
    for code, count in sorted(rejected.items()):
        table.add_row(f"Rejected: {code}", str(count))
    for rule_id, count in sorted(violations.items()):
        table.add_row(f"[red]Violation {rule_id}[/red]", str(count))
    console.print(table)

    if failing_seeds:
        console.print(f"[red]Failing seeds: {failing_seeds[:10]}[/red]")
    else:
        console.print("[green]No violations[/green]")
    return len(failing_seeds)


# ============================================================================
# Entry point
# ============================================================================

def build_session(args: argparse.Namespace, console: Console) -> tuple[GameSession, GameSnapshot]:
    """Combine the saved snapshot with command-line overrides."""
    snapshot = load_snapshot(YamlFileStore(args.store)) if args.store else GameSnapshot()
    rng = random.Random(args.seed)

    players: list[Player] = snapshot.players
    if args.names:
        players = roster_from_names(args.names, rng)

    settings = snapshot.settings
    updates: dict = {}
    if args.modes:
        updates["enabled_modes"] = {GameMode(m) for m in args.modes}
    if args.randomize:
        updates["randomize"] = True
    if args.impostors is not None:
        updates["number_of_impostors"] = args.impostors
    if args.no_hint:
        updates["hint_enabled"] = False
    if args.timer is not None:
        updates["timer"] = TimerSettings(enabled=args.timer > 0, length_seconds=max(args.timer, 1))
    settings = settings.model_copy(update=updates)

    selected = args.categories if args.categories else snapshot.selected_categories

    snapshot = snapshot.model_copy(update={
        "players": players,
        "settings": settings,
        "selected_categories": selected,
    })
    logger.debug("Setup: %d players, settings=%s", len(players), settings)
    session = GameSession(
        players,
        settings=settings,
        categories=snapshot.categories,
        selected_categories=selected,
        rng=rng,
        timer_factory=make_timer_factory(console),
    )
    return session, snapshot


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Who? - a pass-the-device social deduction word game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible rounds")
    parser.add_argument("--names", nargs="+", default=None, help="Player names, in seating order")
    parser.add_argument(
        "--modes",
        nargs="+",
        default=None,
        choices=[m.value for m in GameMode],
        help="Enabled game modes",
    )
    parser.add_argument("--randomize", action="store_true", help="Draw enabled modes at random")
    parser.add_argument("--impostors", type=int, default=None, help="Number of impostors")
    parser.add_argument("--no-hint", action="store_true", help="Do not give impostors a hint")
    parser.add_argument("--timer", type=int, default=None, help="Discussion length in seconds (0 disables)")
    parser.add_argument("--categories", nargs="+", default=None, help="Selected category names")
    parser.add_argument("--store", type=str, default=None, help="YAML file to load and save the setup")
    parser.add_argument("--games", type=int, default=None, help="Run N random rounds with audits (stress test mode)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if args.games is not None:
        if args.games < 1:
            print("Error: --games must be a positive integer")
            return 1
        return 1 if run_stress_test(args.games, seed_base=args.seed) else 0

    console = Console()
    session, snapshot = build_session(args, console)
    asyncio.run(run_interactive(session, console))

    if args.store:
        save_snapshot(YamlFileStore(args.store), snapshot)
        console.print(f"Setup saved to {args.store}")
    return 0


if __name__ == "__main__":
    exit(main())
