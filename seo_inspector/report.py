from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Sequence
from urllib.parse import urlparse

from fpdf import FPDF

from seo_inspector.models import SeoAnalysisResult, Tag

# ---------------------------------------------------------------------------
# Colour constants (RGB tuples)
# ---------------------------------------------------------------------------
GREEN = (34, 197, 94)
YELLOW = (245, 158, 11)
RED = (239, 68, 68)
DARK_BG = (30, 41, 59)
LIGHT_TEXT = (226, 232, 240)
WHITE = (255, 255, 255)
GREY = (148, 163, 184)
DARK_CARD = (51, 65, 85)

STATUS_COLORS: dict[str, tuple[int, int, int]] = {
    "good": GREEN,
    "success": GREEN,
    "warning": YELLOW,
    "missing": RED,
}

SECTION_DESCRIPTIONS: dict[str, str] = {
    "Basic Tags": "Title, meta description, canonical URL, robots directive and viewport.",
    "Open Graph": "Properties used by Facebook, LinkedIn and other platforms to build link previews.",
    "Twitter Card": "Properties used by Twitter to render shared links as cards.",
}


def _score_color(score: int) -> tuple[int, int, int]:
    if score >= 80:
        return GREEN
    if score >= 50:
        return YELLOW
    return RED


def _score_label(score: int) -> str:
    if score >= 80:
        return "Good"
    if score >= 50:
        return "Needs Work"
    return "Poor"


def _pdf_text(text: str) -> str:
    # Core fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def report_filename(data: SeoAnalysisResult) -> str:
    host = urlparse(data.url).hostname or "page"
    day = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    return f"seo-report-{host}-{day}.pdf"


# ===================================================================
# PDF class
# ===================================================================

class SEOTagReportPDF(FPDF):
    def __init__(self) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.set_auto_page_break(auto=True, margin=20)

    def _set_color(self, rgb: tuple[int, int, int]) -> None:
        self.set_text_color(*rgb)

    def _dark_page(self) -> None:
        self.add_page()
        self.set_fill_color(*DARK_BG)
        self.rect(0, 0, self.w, self.h, "F")
        self.set_y(15)

    def _ensure_space(self, needed: float) -> None:
        if self.get_y() > self.h - needed:
            self._dark_page()

    def _heading(self, text: str) -> None:
        self.set_font("Helvetica", "B", 20)
        self._set_color(WHITE)
        self.set_xy(15, 15)
        self.cell(0, 10, text, new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(*GREY)
        self.set_line_width(0.3)
        self.line(15, 28, self.w - 15, 28)
        self.set_y(33)

    def _status_badge(self, x: float, y: float, status: str) -> float:
        color = STATUS_COLORS.get(status, GREY)
        label = status.upper()
        self.set_font("Helvetica", "B", 6.5)
        badge_w = self.get_string_width(label) + 6
        tint = tuple(min(255, c + 140) for c in color)
        self.set_fill_color(*tint)
        self.rect(x, y, badge_w, 5.5, "F")
        self._set_color(color)
        self.set_xy(x, y + 0.3)
        self.cell(badge_w, 5.5, label, align="C")
        return badge_w


# ===================================================================
# Page renderers
# ===================================================================

def _draw_arc(pdf: SEOTagReportPDF, cx: float, cy: float, r: float, start_deg: float, end_deg: float) -> None:
    """Draw an arc as small line segments."""
    steps = max(30, int(abs(end_deg - start_deg) / 2))
    pts = [
        (
            cx + r * math.cos(math.radians(start_deg + (end_deg - start_deg) * i / steps)),
            cy + r * math.sin(math.radians(start_deg + (end_deg - start_deg) * i / steps)),
        )
        for i in range(steps + 1)
    ]
    for (x1, y1), (x2, y2) in zip(pts, pts[1:]):
        pdf.line(x1, y1, x2, y2)


def _render_cover(pdf: SEOTagReportPDF, data: SeoAnalysisResult) -> None:
    pdf._dark_page()
    page_w = pdf.w

    pdf.set_font("Helvetica", "B", 30)
    pdf._set_color(WHITE)
    pdf.set_y(50)
    pdf.cell(0, 14, "SEO Tag Report", align="C", new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "", 13)
    pdf._set_color(GREY)
    pdf.set_y(72)
    pdf.cell(0, 8, _pdf_text(data.url), align="C", new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "", 10)
    pdf.set_y(84)
    pdf.cell(0, 6, f"Analyzed {_pdf_text(data.analyzed_at)}", align="C", new_x="LMARGIN", new_y="NEXT")

    # Score gauge: 270 degree arc starting at 135
    cx, cy, radius = page_w / 2, 145, 38
    color = _score_color(data.score)
    pdf.set_line_width(3.5)
    pdf.set_draw_color(80, 90, 110)
    _draw_arc(pdf, cx, cy, radius, 135, 405)
    if data.score > 0:
        pdf.set_draw_color(*color)
        _draw_arc(pdf, cx, cy, radius, 135, 135 + 270 * data.score / 100)

    pdf.set_font("Helvetica", "B", 36)
    pdf._set_color(color)
    score_str = str(data.score)
    tw = pdf.get_string_width(score_str)
    pdf.set_xy(cx - tw / 2, cy - 12)
    pdf.cell(tw, 14, score_str)

    pdf.set_font("Helvetica", "", 12)
    pdf._set_color(GREY)
    label = _score_label(data.score)
    lw = pdf.get_string_width(label)
    pdf.set_xy(cx - lw / 2, cy + 6)
    pdf.cell(lw, 6, label)

    pdf.set_y(210)
    pdf.set_font("Helvetica", "", 11)
    pdf._set_color(LIGHT_TEXT)
    pdf.cell(
        0, 8, f"{data.total_tags} tags found  |  {data.issues_count} issues",
        align="C", new_x="LMARGIN", new_y="NEXT",
    )


def _render_tag_row(pdf: SEOTagReportPDF, tag: Tag) -> None:
    pdf._ensure_space(20)
    y = pdf.get_y()
    badge_w = pdf._status_badge(17, y + 0.5, tag.status)

    text_x = 17 + badge_w + 3
    text_w = pdf.w - text_x - 17
    pdf.set_font("Helvetica", "B", 8.5)
    pdf._set_color(WHITE)
    pdf.set_xy(text_x, y)
    name = tag.name if tag.char_count is None else f"{tag.name} ({tag.char_count} chars)"
    pdf.multi_cell(text_w, 4.5, _pdf_text(name))

    lines = [line for line in (tag.value, tag.message) if line]
    pdf.set_font("Helvetica", "", 8)
    for line in lines:
        pdf._set_color(LIGHT_TEXT if line == tag.value else GREY)
        pdf.set_x(text_x)
        pdf.multi_cell(text_w, 4.5, _pdf_text(line))

    if pdf.get_y() < y + 6:
        pdf.set_y(y + 6)
    pdf.set_y(pdf.get_y() + 2)


def _render_section(pdf: SEOTagReportPDF, title: str, tags: Sequence[Tag]) -> None:
    pdf._ensure_space(60)
    y = pdf.get_y()
    issues = sum(1 for t in tags if t.status != "good")

    pdf.set_fill_color(*DARK_CARD)
    pdf.rect(15, y, pdf.w - 30, 12, "F")
    pdf.set_font("Helvetica", "B", 12)
    pdf._set_color(WHITE)
    pdf.set_xy(19, y + 2.5)
    pdf.cell(80, 7, title)
    pdf.set_font("Helvetica", "", 9)
    pdf._set_color(RED if issues else GREEN)
    pdf.set_xy(pdf.w - 60, y + 2.5)
    pdf.cell(41, 7, f"{issues} issues" if issues else "All good", align="R")
    pdf.set_y(y + 14)

    desc = SECTION_DESCRIPTIONS.get(title)
    if desc:
        pdf.set_font("Helvetica", "I", 8)
        pdf._set_color(GREY)
        pdf.set_x(17)
        pdf.cell(0, 5, desc, new_x="LMARGIN", new_y="NEXT")
        pdf.set_y(pdf.get_y() + 2)

    for tag in tags:
        _render_tag_row(pdf, tag)
    pdf.set_y(pdf.get_y() + 6)


def _render_recommendations(pdf: SEOTagReportPDF, data: SeoAnalysisResult) -> None:
    pdf._dark_page()
    pdf._heading("Recommendations")

    if not data.recommendations:
        pdf.set_font("Helvetica", "", 10)
        pdf._set_color(GREEN)
        pdf.set_x(15)
        pdf.cell(0, 6, "Nothing to recommend.", new_x="LMARGIN", new_y="NEXT")
        return

    for rec in data.recommendations:
        pdf._ensure_space(15)
        y = pdf.get_y()
        badge_w = pdf._status_badge(15, y + 0.5, rec.type)
        pdf.set_font("Helvetica", "", 8.5)
        pdf._set_color(LIGHT_TEXT)
        pdf.set_xy(15 + badge_w + 3, y)
        pdf.multi_cell(pdf.w - badge_w - 33, 4.5, _pdf_text(rec.message))
        pdf.set_y(max(pdf.get_y(), y + 6) + 2)


# ===================================================================
# Public API
# ===================================================================

def generate_pdf(data: SeoAnalysisResult) -> bytes:
    """Render an analysis result as a PDF report and return raw bytes."""
    pdf = SEOTagReportPDF()

    _render_cover(pdf, data)

    pdf._dark_page()
    pdf._heading("Tag Details")
    _render_section(
        pdf, "Basic Tags",
        [data.title, data.description, data.canonical, data.robots, data.viewport],
    )
    _render_section(pdf, "Open Graph", data.og_tags)
    _render_section(pdf, "Twitter Card", data.twitter_tags)

    _render_recommendations(pdf, data)

    return bytes(pdf.output())
