from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from io import BytesIO
from datetime import datetime

import pandas as pd
from reportlab.lib.pagesizes import letter, A4
from reportlab.lib.units import inch
from reportlab.lib import colors
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet

from stresscalc.formulas import StressResult, format_stress_value

@dataclass(frozen=True)
class ReportMeta:
    title: str = "Stress Calculation Report"
    units_note: str = ""
    project_note: str = ""
    page_size: str = "LETTER"  # "LETTER" or "A4"

def _pagesize(meta: ReportMeta):
    if meta.page_size.upper() == "A4":
        return A4
    return letter

def clipboard_text(result: StressResult) -> str:
    """Plain-text summary of a result for copying."""
    pairs = ", ".join(f"{k}: {v}" for k, v in result.inputs.items())
    return "\n".join([
        "Stress Calculation Result:",
        f"Formula: {result.formula}",
        f"Result: {format_stress_value(result.value, result.unit)}",
        f"Inputs: {pairs}",
    ])

def result_frame(result: StressResult) -> pd.DataFrame:
    return pd.DataFrame(
        [{"input": k, "value": float(v)} for k, v in result.inputs.items()],
        columns=["input", "value"],
    )

def make_result_pdf(result: StressResult, meta: Optional[ReportMeta] = None) -> bytes:
    """One-page PDF with the formula, the formatted result and the base-unit inputs."""
    meta = meta or ReportMeta()
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=_pagesize(meta),
        leftMargin=0.75*inch,
        rightMargin=0.75*inch,
        topMargin=0.75*inch,
        bottomMargin=0.75*inch,
        title=meta.title,
        author="Stress Calculator",
    )
    styles = getSampleStyleSheet()
    story: List = []

    story.append(Paragraph(meta.title, styles["Title"]))
    story.append(Spacer(1, 0.15*inch))
    story.append(Paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}", styles["Normal"]))
    if meta.units_note:
        story.append(Paragraph(f"Units: {meta.units_note}", styles["Normal"]))
    if meta.project_note:
        story.append(Paragraph(meta.project_note, styles["Normal"]))
    story.append(Spacer(1, 0.2*inch))

    story.append(Paragraph("Result", styles["Heading2"]))
    story.append(Paragraph(f"Formula: {result.formula}", styles["Normal"]))
    story.append(Paragraph(f"Stress: {format_stress_value(result.value, result.unit)}", styles["Normal"]))
    story.append(Spacer(1, 0.15*inch))

    story.append(Paragraph("Inputs (base units)", styles["Heading2"]))
    df = result_frame(result)
    data = [list(df.columns)] + [[row.input, f"{row.value:.6g}"] for row in df.itertuples(index=False)]

    tbl = Table(data, repeatRows=1)
    tbl.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#2b2b2b")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.white),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 9),
        ("FONTSIZE", (0,1), (-1,-1), 8),
        ("GRID", (0,0), (-1,-1), 0.25, colors.grey),
        ("ROWBACKGROUNDS", (0,1), (-1,-1), [colors.whitesmoke, colors.lightgrey]),
        ("VALIGN", (0,0), (-1,-1), "TOP"),
        ("LEFTPADDING", (0,0), (-1,-1), 4),
        ("RIGHTPADDING", (0,0), (-1,-1), 4),
    ]))
    story.append(tbl)

    doc.build(story)
    return buf.getvalue()
