# app/services/report.py
# -----------------------------------------------------------------------------
# 계산 결과 PDF 리포트 (reportlab platypus)
# - 입력 1건 + 결과 1건을 받아 PDF 바이트 반환
# -----------------------------------------------------------------------------
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.schemas.calculator import CalculatorInput, ResultRecord

TITLE = "AI ROI Calculator Results"


def _money(value: float) -> str:
    return f"${value:,.2f}"


def render_report(calculator: CalculatorInput, results: ResultRecord) -> bytes:
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=letter,
        rightMargin=0.75 * inch,
        leftMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
        title=TITLE,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontSize=25,
        alignment=TA_CENTER,
        spaceAfter=24,
        textColor=colors.HexColor("#1a365d"),
    )
    section_style = ParagraphStyle(
        "ReportSection",
        parent=styles["Heading2"],
        fontSize=14,
        spaceBefore=16,
        spaceAfter=8,
        textColor=colors.HexColor("#2c5282"),
    )
    body = styles["Normal"]

    story = [
        Paragraph(TITLE, title_style),
        Paragraph(f"Company: {escape(calculator.company_name)}", body),
        Paragraph(f"Industry: {escape(calculator.industry)}", body),
        Paragraph("Annual Benefits:", section_style),
    ]

    benefits = Table(
        [
            ["Email Revenue", _money(results.email_revenue)],
            ["Social Media Savings", _money(results.social_savings)],
            ["Chatbot Savings", _money(results.chatbot_savings)],
            ["Product Description Savings", _money(results.product_savings)],
            ["Total Benefits", _money(results.total_benefits)],
        ],
        colWidths=[3.5 * inch, 2 * inch],
    )
    benefits.setStyle(
        TableStyle(
            [
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                ("LINEABOVE", (0, -1), (-1, -1), 1, colors.HexColor("#2d3748")),
                ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
            ]
        )
    )
    story += [
        benefits,
        Spacer(1, 0.3 * inch),
        Paragraph(f"ROI: {results.roi:,.2f}%", body),
        Paragraph(f"Payback Period: {results.payback_months:,.2f} months", body),
    ]

    doc.build(story)
    return buf.getvalue()
