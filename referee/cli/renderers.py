"""Rich renderers for CLI outputs."""

from __future__ import annotations

from typing import Any, Optional

from rich.panel import Panel
from rich.table import Table

from referee.cli.io import console
from referee.services import scoring
from referee.services.config_service import OutputConfig

_CONFIDENCE_STYLES = {"high": "green", "medium": "yellow", "low": "red"}


def rank_positions(results: list[dict[str, Any]]) -> list[int]:
    """Return the 1-based rank of each result, ties kept in input order."""

    order = scoring.rank(
        range(len(results)), key=lambda index: results[index].get("overallScore") or 0.0
    )
    positions = [0] * len(results)
    for rank, index in enumerate(order, start=1):
        positions[index] = rank
    return positions


def render_comparison_output(
    comparison: dict[str, Any], output: Optional[OutputConfig] = None
) -> None:
    """Display the scored candidates and the recommendation."""

    output = output or OutputConfig()
    results = comparison.get("results") or []
    if not results:
        console.print(Panel("No candidates were compared.", title="Comparison"))
        return

    category = comparison.get("category") or "comparison"
    table = Table(title=f"Comparison: {category}", show_lines=False)
    table.add_column("Rank", justify="right")
    table.add_column("Candidate", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Best for", overflow="fold")

    for position, result in zip(rank_positions(results), results):
        score = result.get("overallScore") or 0.0
        table.add_row(
            str(position),
            result.get("name") or "",
            f"{float(score):.{output.score_precision}f}",
            result.get("bestFor") or "-",
        )
    console.print(table)

    if output.show_pros_cons:
        for result in results:
            render_candidate_detail(result)

    constraints = comparison.get("constraints") or {}
    if constraints:
        lines = [f"{key}: {value}" for key, value in constraints.items()]
        console.print(Panel("\n".join(lines), title="Constraints (informational)"))

    render_recommendation(comparison.get("recommendation") or {})


def render_candidate_detail(result: dict[str, Any]) -> None:
    pros = result.get("pros") or []
    cons = result.get("cons") or []
    if not pros and not cons:
        return
    lines: list[str] = []
    if pros:
        lines.append("[bold green]Pros:[/]")
        lines.extend(f"+ {item}" for item in pros)
    if cons:
        lines.append("[bold red]Cons:[/]")
        lines.extend(f"- {item}" for item in cons)
    console.print(Panel("\n".join(lines), title=result.get("name") or "Candidate"))


def render_recommendation(recommendation: dict[str, Any]) -> None:
    """Render the winner, confidence and alternatives."""

    if not recommendation:
        console.print(Panel("No recommendation returned.", title="Recommendation"))
        return

    confidence = recommendation.get("confidence") or "unknown"
    style = _CONFIDENCE_STYLES.get(confidence, "white")
    lines = [
        f"[bold]Recommended:[/] {recommendation.get('recommended') or 'None'}",
        f"[bold]Confidence:[/] [{style}]{confidence}[/]",
        f"[bold]Reasoning:[/]\n{recommendation.get('reasoning') or ''}",
    ]
    alternatives = recommendation.get("alternatives") or []
    if alternatives:
        lines.append("\n[bold]Alternatives:[/]")
        for idx, alternative in enumerate(alternatives, start=1):
            lines.append(f"{idx}. {alternative.get('name')}: {alternative.get('reason')}")
    console.print(Panel("\n".join(lines), title="Recommendation"))


def render_category_table(categories: list[dict[str, Any]]) -> None:
    """Render supported categories with their criteria and known candidates."""

    if not categories:
        console.print(Panel("No categories available.", title="Categories"))
        return

    table = Table(title="Categories", show_lines=True)
    table.add_column("Category", style="bold")
    table.add_column("Label")
    table.add_column("Criteria", overflow="fold")
    table.add_column("Known candidates", overflow="fold")

    for entry in categories:
        names = [candidate.get("name") or "" for candidate in entry.get("candidates") or []]
        table.add_row(
            entry.get("category") or "",
            entry.get("label") or "-",
            ", ".join(entry.get("criteria") or []),
            ", ".join(names) or "-",
        )
    console.print(table)


def render_preset_table(presets: dict[str, dict[str, Any]]) -> None:
    if not presets:
        console.print(Panel("No presets configured.", title="Presets"))
        return

    table = Table(title="Presets")
    table.add_column("Preset", style="bold")
    table.add_column("Category")
    table.add_column("Candidates", overflow="fold")
    for name, payload in sorted(presets.items()):
        items = payload.get("items") or []
        table.add_row(
            name,
            str(payload.get("category") or "-"),
            ", ".join(str(item) for item in items),
        )
    console.print(table)


__all__ = [
    "rank_positions",
    "render_candidate_detail",
    "render_category_table",
    "render_comparison_output",
    "render_preset_table",
    "render_recommendation",
]
