"""
Plain-text rendering of the published dashboard state.

Used by the CLI to echo slot updates to the terminal.
"""

from typing import List, Sequence

from room_monitor_core.domain.models import RoomStatus, SensorReading, Selection


# ───────────────────────── history ──────────────────────────
def format_history(selection: Selection, readings: Sequence[SensorReading]) -> str:
    title = f"Room {selection.room} - {selection.date.strftime('%B %d, %Y')}"
    if not readings:
        return f"{title}\n  (no readings)"
    lines: List[str] = [title, f"  {'time':>5}  {'temp °C':>8}  {'hum %':>6}"]
    for r in readings:
        lines.append(f"  {r.time:>5}  {r.temperature:>8.1f}  {r.humidity:>6.1f}")
    lo = min(r.temperature for r in readings)
    hi = max(r.temperature for r in readings)
    lines.append(f"  temperature range {lo:.1f}..{hi:.1f} °C over {len(readings)} readings")
    return "\n".join(lines)


# ───────────────────────── status ───────────────────────────
def format_status_cards(statuses: Sequence[RoomStatus]) -> str:
    if not statuses:
        return "Current Room Status\n  (no rooms reported)"
    lines = ["Current Room Status"]
    for s in statuses:
        lines.append(f"  Room {s.room}: Temperature: {s.temperature}°C  Humidity: {s.humidity}%")
    return "\n".join(lines)
