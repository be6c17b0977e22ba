"""Server-side rendering of the weekly study-hours chart."""

import io
import threading
from typing import Optional

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from app.schemas.record import WeeklyHoursPoint

LINE_COLOR = (75 / 255, 192 / 255, 192 / 255, 1.0)
FILL_COLOR = (75 / 255, 192 / 255, 192 / 255, 0.2)


class WeeklyChart:
    """
    Owns the current chart figure.

    `render` always tears down the previous figure before drawing a new
    one, so at most one figure is alive per instance. Renders are
    serialized because sync handlers share the instance across threads.
    """

    def __init__(self, title: str = "Weekly study hours"):
        self.title = title
        self.figure: Optional[Figure] = None
        self._lock = threading.Lock()

    def destroy(self) -> None:
        with self._lock:
            self._close()

    def _close(self) -> None:
        if self.figure is not None:
            plt.close(self.figure)
            self.figure = None

    def render(self, points: list[WeeklyHoursPoint]) -> bytes:
        """Draw `points` as a filled line chart and return it as PNG bytes."""
        with self._lock:
            self._close()
            return self._draw(points)

    def _draw(self, points: list[WeeklyHoursPoint]) -> bytes:
        labels = [p.week for p in points]
        values = [p.total_hours for p in points]

        fig, ax = plt.subplots(figsize=(8, 4))
        self.figure = fig

        x = list(range(len(labels)))
        ax.plot(x, values, color=LINE_COLOR, marker="o", label="Study hours per week")
        ax.fill_between(x, values, color=FILL_COLOR)
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=30, ha="right", fontsize=8)
        ax.set_xlabel("Week")
        ax.set_ylabel("Total study hours")
        ax.set_title(self.title)
        ax.set_ylim(bottom=0)
        if points:
            ax.legend(loc="upper left")

        buf = io.BytesIO()
        fig.tight_layout()
        fig.savefig(buf, format="png", dpi=100)
        buf.seek(0)
        return buf.read()
