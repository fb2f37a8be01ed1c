#!/usr/bin/env python3
"""creditrank CLI for day-to-day rating maintenance."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from creditrank.log import setup_logging
from creditrank.rating import InvalidRatingError, Rating, RatingService

console = Console()


def render_ratings(service: RatingService, ratings: list[Rating], title: str) -> None:
    """Print ratings as a table, best rank first."""
    if not ratings:
        console.print("[red]No ratings found.[/]")
        return

    table = Table(title=title)
    table.add_column("Rank", justify="right")
    table.add_column("Moody's")
    table.add_column("S&P")
    table.add_column("Fitch")
    table.add_column("Grade")
    table.add_column("ID", justify="right", style="dim")

    for r in ratings:
        grade = (
            "investment"
            if service.classifier.is_investment_grade_rank(r.order_number)
            else "speculative"
        )
        table.add_row(
            str(r.order_number),
            r.moodys_rating or "-",
            r.sp_rating or "-",
            r.fitch_rating or "-",
            grade,
            str(r.id),
        )
    console.print(table)


def list_ratings(service: RatingService, band: str = None, agency: str = None) -> None:
    """List ratings, optionally narrowed to a grade band or an agency."""
    if band == "investment":
        render_ratings(service, service.find_investment_grade(), "Investment grade")
    elif band == "speculative":
        render_ratings(service, service.find_speculative_grade(), "Speculative grade")
    elif agency:
        render_ratings(service, service.find_by_agency(agency), f"Rated by {agency.upper()}")
    else:
        render_ratings(service, service.find_all(), "All ratings")


def add_rating(service: RatingService, moodys: str, sp: str, fitch: str, rank: int = None) -> None:
    """Validate and store a new rating."""
    rating = Rating(moodys_rating=moodys, sp_rating=sp, fitch_rating=fitch, order_number=rank)
    try:
        saved = service.save(rating)
    except InvalidRatingError as e:
        console.print(f"[red]{e.kind.value}:[/] {e}")
        return
    console.print(f"[green]Saved rating {saved.id} at rank {saved.order_number}.[/]")


def delete_rating(service: RatingService) -> None:
    """Prompt for a rating and delete it after confirmation."""
    ratings = service.find_all()
    if not ratings:
        console.print("[red]No ratings found.[/]")
        return

    selected = questionary.select(
        "Select a rating to delete:",
        choices=[
            questionary.Choice(
                title=f"#{r.order_number}  {r.moodys_rating or '-'} / {r.sp_rating or '-'} / {r.fitch_rating or '-'}",
                value=r,
            )
            for r in ratings
        ],
    ).ask()

    # User pressed Ctrl+C or Escape
    if selected is None:
        console.print("[dim]Cancelled.[/]")
        return

    if not questionary.confirm(f"Delete rating at rank {selected.order_number}?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    try:
        service.delete_by_id(selected.id)
    except InvalidRatingError as e:
        console.print(f"[red]{e.kind.value}:[/] {e}")
        return
    console.print(f"[green]Deleted rating {selected.id}.[/]")


def summary(service: RatingService) -> None:
    """Show grade counts and ratings the agencies disagree on."""
    counts = service.grade_counts()
    console.print(f"Investment grade: [bold]{counts['investment']}[/]")
    console.print(f"Speculative grade: [bold]{counts['speculative']}[/]")

    divergent = service.find_divergent()
    if divergent:
        render_ratings(service, divergent, "Agency divergence")
    else:
        console.print("[dim]No agency divergence.[/]")


def main(argv: list[str] = None) -> None:
    parser = argparse.ArgumentParser(description="creditrank CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List ratings by rank")
    list_parser.add_argument("--band", choices=["investment", "speculative"])
    list_parser.add_argument("--agency", help="MOODYS, SP or FITCH")

    add_parser = subparsers.add_parser("add", help="Add a rating")
    add_parser.add_argument("--moodys")
    add_parser.add_argument("--sp")
    add_parser.add_argument("--fitch")
    add_parser.add_argument("--rank", type=int)

    subparsers.add_parser("delete", help="Delete a rating")
    subparsers.add_parser("summary", help="Grade counts and agency divergence")

    args = parser.parse_args(argv)

    setup_logging()
    service = RatingService()

    if args.command == "list":
        list_ratings(service, band=args.band, agency=args.agency)
    elif args.command == "add":
        add_rating(service, args.moodys, args.sp, args.fitch, args.rank)
    elif args.command == "delete":
        delete_rating(service)
    elif args.command == "summary":
        summary(service)


if __name__ == "__main__":
    main()
