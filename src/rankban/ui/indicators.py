"""Pure functions for building movement and trajectory text."""

from rich.text import Text

from rankban.model.compare import MovementResult
from rankban.model.trajectory import NEVER_RANKED
from rankban.models import CardTrajectory

ICON_UP = "▲"
ICON_DOWN = "▼"
ICON_SAME = "—"
ICON_HANDLE = "⠿"


def movement_text(result: MovementResult | None) -> Text:
    """Arrow and distance for a card's movement since the baseline.

    ▲2 climbed two places, ▼1 fell one, — held its place, NEW wasn't in
    the baseline, OUT dropped off the board. Empty without a baseline.
    """
    if result is None:
        return Text()
    if result.is_new:
        return Text("NEW", style="bold black on yellow")
    if result.is_removed:
        return Text("OUT", style="dim red")
    movement = result.movement
    if movement is None:
        return Text()
    if movement == 0:
        return Text(ICON_SAME, style="dim")
    if movement > 0:
        return Text(f"{ICON_UP}{movement}", style="bold green")
    return Text(f"{ICON_DOWN}{-movement}", style="bold red")


def trajectory_text(trajectory: CardTrajectory | None) -> Text:
    """Muted rank history like "3→1→2". Nothing for never-ranked cards."""
    if trajectory is None or trajectory.summary == NEVER_RANKED:
        return Text()
    return Text(trajectory.summary, style="dim")


def build_card_line(
    rank: int,
    name: str,
    movement: MovementResult | None = None,
    trajectory: CardTrajectory | None = None,
) -> Text:
    """One list row: handle, rank, name, then indicators."""
    line = Text()
    line.append(f"{ICON_HANDLE} ", style="dim")
    line.append(f"{rank:>2}. ", style="bold")
    line.append(name)
    indicator = movement_text(movement)
    if indicator:
        line.append("  ")
        line.append_text(indicator)
    history = trajectory_text(trajectory)
    if history:
        line.append("  ")
        line.append_text(history)
    return line
