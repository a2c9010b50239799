"""PDF generation for yearly shift statistics.

This module creates printable PDF reports showing:
- Yearly totals
- Monthly work/rest bar chart
- Monthly shift distribution table
- Weekday work pattern for a chosen month
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from shiftcal.domain.models import SHIFT_CONFIG, WORK_SHIFTS, ShiftType
from shiftcal.scheduling.service import ScheduleService
from shiftcal.statistics.aggregator import (
    MonthlyShiftDistribution,
    MonthlyWorkRest,
    WeeklyWorkPattern,
)

# Built-in reportlab CID font with CJK coverage for shift and weekday labels
CJK_FONT = "STSong-Light"


def _hex_to_rgb(value: str) -> tuple[float, float, float]:
    value = value.lstrip("#")
    return tuple(int(value[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    shift: _hex_to_rgb(SHIFT_CONFIG[shift].accent_color) for shift in ShiftType
}
COLORS["work"] = (0.3, 0.45, 0.8)
COLORS["rest"] = COLORS[ShiftType.OFF]


class PDFGenerator:
    """Generates printable PDF statistics reports.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(service, 2025, "stats-2025.pdf", month=9)
    """

    def __init__(
        self,
        page_width: float = 612,  # Letter portrait width (8.5")
        page_height: float = 792,  # Letter portrait height (11")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        service: ScheduleService,
        year: int,
        output_path: Union[str, Path],
        month: Optional[int] = None,
    ) -> None:
        """Generate the PDF report and save to file.

        Args:
            service: Schedule service to read statistics from.
            year: Year to report on.
            output_path: Path to save the PDF.
            month: Optional month for the weekday pattern section.
        """
        canvas = self._load_canvas()
        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw_report(c, service, year, month)
        c.save()

    def generate_to_buffer(
        self,
        service: ScheduleService,
        year: int,
        month: Optional[int] = None,
    ) -> BytesIO:
        """Generate the PDF report and return it as a bytes buffer."""
        canvas = self._load_canvas()
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw_report(c, service, year, month)
        c.save()
        buffer.seek(0)
        return buffer

    def _load_canvas(self):
        """Import reportlab and register the CJK font."""
        try:
            from reportlab.pdfbase import pdfmetrics
            from reportlab.pdfbase.cidfonts import UnicodeCIDFont
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        if CJK_FONT not in pdfmetrics.getRegisteredFontNames():
            pdfmetrics.registerFont(UnicodeCIDFont(CJK_FONT))
        return canvas

    def _draw_report(
        self,
        c,
        service: ScheduleService,
        year: int,
        month: Optional[int],
    ) -> None:
        work_rest = service.monthly_work_rest(year)
        distribution = service.monthly_shift_distribution(year)
        summary = service.yearly_summary(year)

        # Header
        top = self.page_height - self.margin
        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, top - 20, f"Shift Statistics - {year}")

        c.setFont("Helvetica", 10)
        y = top - 45
        for line in (
            f"Work days: {summary.work_days}",
            f"Rest days: {summary.rest_days}",
            f"Work ratio: {summary.work_ratio * 100:.1f}%",
        ):
            c.drawString(self.margin + 20, y, line)
            y -= 15

        # Work/rest chart
        y -= 20
        c.setFont("Helvetica-Bold", 12)
        c.drawString(self.margin, y, "Monthly Work / Rest Days")
        chart_height = 160
        y -= chart_height + 20
        self._draw_work_rest_chart(
            c, work_rest, self.margin + 20, y, self.page_width - 2 * self.margin - 40, chart_height
        )

        # Distribution table
        y -= 50
        c.setFont("Helvetica-Bold", 12)
        c.drawString(self.margin, y, "Monthly Shift Distribution")
        y -= 20
        y = self._draw_distribution_table(c, distribution, self.margin + 20, y)

        if month is not None:
            y -= 30
            c.setFont("Helvetica-Bold", 12)
            c.drawString(self.margin, y, f"Weekday Pattern - {year}-{month:02d}")
            y -= 20
            self._draw_weekly_pattern(c, service.weekly_work_pattern(year, month), self.margin + 20, y)

        c.setFont("Helvetica", 9)
        c.drawCentredString(self.page_width / 2, self.margin - 10, "Page 1 of 1")
        c.showPage()

    def _draw_work_rest_chart(
        self,
        c,
        stats: list[MonthlyWorkRest],
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        """Draw paired work/rest bars for each month."""
        max_days = max((max(s.work_days, s.rest_days) for s in stats), default=0) or 1
        group_width = width / len(stats)
        bar_width = group_width * 0.35

        # Draw axes
        c.setStrokeColorRGB(0, 0, 0)
        c.setLineWidth(1)
        c.line(x, y, x, y + height)  # Y axis
        c.line(x, y, x + width, y)  # X axis

        c.setFont("Helvetica", 7)
        c.drawRightString(x - 5, y, "0")
        c.drawRightString(x - 5, y + height - 5, str(max_days))

        for index, stat in enumerate(stats):
            group_x = x + index * group_width + group_width * 0.15
            for offset, (value, color) in enumerate(
                ((stat.work_days, COLORS["work"]), (stat.rest_days, COLORS["rest"]))
            ):
                bar_height = (value / max_days) * height
                c.setFillColorRGB(*color)
                c.rect(group_x + offset * bar_width, y, bar_width - 1, bar_height, fill=1, stroke=0)

            c.setFillColorRGB(0, 0, 0)
            c.drawCentredString(x + (index + 0.5) * group_width, y - 12, str(stat.month))

        self._draw_legend(c, x, y - 30, [("work", "Work"), ("rest", "Rest")], font="Helvetica")

    def _draw_distribution_table(
        self,
        c,
        stats: list[MonthlyShiftDistribution],
        x: float,
        y: float,
    ) -> float:
        """Draw the per-month shift table and return the y below it."""
        columns = [x, x + 60] + [x + 60 + 70 * (i + 1) for i in range(len(WORK_SHIFTS))]

        c.setFont(CJK_FONT, 9)
        c.setFillColorRGB(0, 0, 0)
        c.drawString(columns[0], y, "Month")
        for column, shift in zip(columns[1:], WORK_SHIFTS):
            c.setFillColorRGB(*COLORS[shift])
            c.drawString(column, y, SHIFT_CONFIG[shift].label)
        c.setFillColorRGB(0, 0, 0)
        c.drawString(columns[-1], y, "Total")
        y -= 14

        c.setFont("Helvetica", 9)
        for stat in stats:
            values = [stat.month, stat.early, stat.mid, stat.late, stat.total]
            for column, value in zip(columns, values):
                c.drawString(column, y, str(value))
            y -= 12
        return y

    def _draw_weekly_pattern(
        self,
        c,
        stats: list[WeeklyWorkPattern],
        x: float,
        y: float,
    ) -> None:
        """Draw horizontal bars of work days per weekday."""
        max_days = max((s.work_days for s in stats), default=0) or 1
        bar_max = 200

        for stat in stats:
            c.setFont(CJK_FONT, 9)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(x, y, stat.label)
            c.setFillColorRGB(*COLORS["work"])
            c.rect(x + 40, y - 2, (stat.work_days / max_days) * bar_max, 10, fill=1, stroke=0)
            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica", 8)
            c.drawString(x + 45 + bar_max, y, str(stat.work_days))
            y -= 14

    def _draw_legend(self, c, x: float, y: float, items, font: str = CJK_FONT) -> None:
        """Draw legend for colors."""
        c.setFont("Helvetica-Bold", 8)
        c.setFillColorRGB(0, 0, 0)
        c.drawString(x, y, "Legend:")

        c.setFont(font, 7)
        current_x = x + 45
        for key, label in items:
            c.setFillColorRGB(*COLORS.get(key, (0.5, 0.5, 0.5)))
            c.rect(current_x, y - 2, 12, 10, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(current_x + 15, y, label)
            current_x += 70
