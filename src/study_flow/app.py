"""Interactive CLI application."""
import logging
import os
from datetime import date
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt
from rich.table import Table

from study_flow.dashboard import build_summary, get_review_rows
from study_flow.models import ConfigurationError
from study_flow.planner import GeminiPlanGenerator, PlanSession, generate_plan_sync
from study_flow.store import ConfigStore

MIN_DAILY_HOURS = 1
MAX_DAILY_HOURS = 16

console = Console()


def show_welcome():
    console.print(Panel(
        "[bold]StudyFlow[/bold]\n[dim]Your companion for exam success[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("dashboard", "Days to exam + readiness"),
        ("schedule", "Spaced repetition schedule"),
        ("config", "Show study parameters"),
        ("date", "Set exam date"),
        ("hours", "Set daily study hours"),
        ("subject", "Add or remove a subject"),
        ("topic", "Add or remove a weak topic"),
        ("plan", "Generate AI strategy"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def cmd_dashboard(store: ConfigStore, today: Optional[date] = None):
    summary = build_summary(store.config, today)
    score = summary["readiness_score"]
    color = summary["readiness_color"]
    console.print(Panel(
        f"[bold]{summary['days_remaining']}[/bold] days to exam ({store.config.exam_date:%b %d, %Y})",
        title="Readiness Dashboard", border_style="blue",
    ))

    bar_filled = int(score / 5)
    bar_empty = 20 - bar_filled
    bar = f"[{color}]{'█' * bar_filled}{'░' * bar_empty}[/{color}]"
    console.print(f"\n  Readiness: [bold]{score}%[/bold] {bar} [{color}]{summary['readiness_label']}[/{color}]\n")

    focus = summary["priority_focus"]
    console.print(
        f"  [yellow]Priority focus:[/yellow] Focus on [bold]{focus.display_topic}[/bold] today. "
        f"Spend at least {focus.recommended_hours} hours on active recall for this topic."
    )
    console.print(
        f"  [cyan]Weekly mock test:[/cyan] {summary['next_mock_test']:%A, %b %d} [dim](Upcoming)[/dim]"
    )


def cmd_schedule(store: ConfigStore, today: Optional[date] = None):
    summary = build_summary(store.config, today)
    if not summary["schedule"]:
        console.print("[yellow]Add weak topics to generate a spaced repetition schedule.[/yellow]")
        return
    table = Table(title="Spaced Repetition Schedule")
    table.add_column("Topic", style="cyan")
    table.add_column("Day", justify="right")
    table.add_column("Date")
    table.add_column("Status")
    for row in get_review_rows(summary["schedule"], today):
        table.add_row(
            row["topic"],
            str(row["offset_days"]),
            f"{row['date']:%b %d}",
            "[green]Done[/green]" if row["passed"] else "[dim]Upcoming[/dim]",
        )
    console.print(table)


def cmd_config(store: ConfigStore):
    config = store.config
    table = Table(title="Study Parameters", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Exam date", config.exam_date.isoformat())
    table.add_row("Daily hours", str(config.daily_hours))
    table.add_row("Subjects", "\n".join(f"{i}. {s}" for i, s in enumerate(config.subjects, 1)) or "-")
    table.add_row("Weak topics", "\n".join(f"{i}. {t}" for i, t in enumerate(config.weak_topics, 1)) or "-")
    console.print(table)


def cmd_date(store: ConfigStore):
    value = Prompt.ask("Exam date (YYYY-MM-DD)", default=store.config.exam_date.isoformat())
    store.set_exam_date(value)
    console.print(f"[green]Exam date set to {store.config.exam_date.isoformat()}[/green]")


def cmd_hours(store: ConfigStore):
    hours = IntPrompt.ask(
        f"Daily study hours ({MIN_DAILY_HOURS}-{MAX_DAILY_HOURS})",
        choices=[str(h) for h in range(MIN_DAILY_HOURS, MAX_DAILY_HOURS + 1)],
        default=store.config.daily_hours,
        show_choices=False,
    )
    store.set_daily_hours(hours)
    console.print(f"[green]Daily hours set to {hours}[/green]")


def _edit_list(items: list[str], label: str, add, remove):
    action = Prompt.ask(f"{label}: add or remove", choices=["a", "r"], default="a")
    if action == "a":
        name = Prompt.ask(f"New {label.lower()}")
        if add(name):
            console.print(f"[green]Added {name.strip()}[/green]")
        else:
            console.print("[yellow]Nothing added.[/yellow]")
        return
    if not items:
        console.print(f"[yellow]No {label.lower()} entries to remove.[/yellow]")
        return
    for i, item in enumerate(items, 1):
        console.print(f"  [cyan]{i}[/cyan]) {item}")
    number = IntPrompt.ask("Remove number")
    if remove(number - 1):
        console.print("[green]Removed.[/green]")
    else:
        console.print("[yellow]No entry with that number.[/yellow]")


def cmd_subject(store: ConfigStore):
    _edit_list(store.config.subjects, "Subject", store.add_subject, store.remove_subject)


def cmd_topic(store: ConfigStore):
    _edit_list(store.config.weak_topics, "Weak topic", store.add_weak_topic, store.remove_weak_topic)


def cmd_plan(session: PlanSession, today: Optional[date] = None):
    with console.status("Generating AI strategy..."):
        text = generate_plan_sync(session, today)
    if text is None:
        console.print("[yellow]A plan is already being generated.[/yellow]")
        return
    console.print(Panel(Markdown(text), title="Personalized AI Strategy", border_style="magenta"))


def get_log_level() -> int:
    """Level from STUDY_FLOW_LOG_LEVEL, WARNING when unset or unknown."""
    level = logging.getLevelName(os.getenv("STUDY_FLOW_LOG_LEVEL", "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main():
    logging.basicConfig(
        level=get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=console)],
    )
    store = ConfigStore()
    session = PlanSession(store, GeminiPlanGenerator())

    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="dashboard").strip().lower()
        try:
            if choice == "dashboard":
                cmd_dashboard(store)
            elif choice == "schedule":
                cmd_schedule(store)
            elif choice == "config":
                cmd_config(store)
            elif choice == "date":
                cmd_date(store)
            elif choice == "hours":
                cmd_hours(store)
            elif choice == "subject":
                cmd_subject(store)
            elif choice == "topic":
                cmd_topic(store)
            elif choice == "plan":
                cmd_plan(session)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Good luck on your exam![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except ConfigurationError as e:
            console.print(f"[red]{e}[/red]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
