from stresscalc.formulas import StressResult
from stresscalc.reporting import ReportMeta, clipboard_text, result_frame, make_result_pdf

RES = StressResult(value=1e8, unit="Pa", formula="σ = F/A", inputs={"force": 1000.0, "area": 1e-05})

def test_clipboard_text():
    assert clipboard_text(RES) == (
        "Stress Calculation Result:\n"
        "Formula: σ = F/A\n"
        "Result: 100.000 MPa\n"
        "Inputs: force: 1000.0, area: 1e-05"
    )

def test_result_frame():
    df = result_frame(RES)
    assert list(df.columns) == ["input", "value"]
    assert df["input"].tolist() == ["force", "area"]

def test_pdf_bytes():
    pdf = make_result_pdf(RES, ReportMeta(units_note="Metric (SI)", page_size="A4"))
    assert pdf.startswith(b"%PDF")
