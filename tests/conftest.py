import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

LIVER_REPORT_TEXT = (
    "LIVER FUNCTION TEST\n"
    "Age: 50\n"
    "Male\n"
    "Total Bilirubin: 1.2\n"
    "SGPT: 35\n"
    "SGOT: 40\n"
    "Albumin: 4.0"
)

HEART_REPORT_TEXT = """CARDIAC ASSESSMENT
Age: 63
Sex: Male
Chest Pain Type: 3
Resting Blood Pressure: 145 mmHg
Serum Cholesterol: 233 mg/dl
Fasting Blood Sugar: 150 mg/dl
Resting ECG: 0
Maximum Heart Rate: 150 bpm
Exercise Induced Angina: yes
ST Depression: 2.3
ST Slope: 0
Major Vessels: 0
Thalassemia: 1"""

DIABETES_REPORT_TEXT = """DIABETES REPORT
Pregnancies: 6
Glucose: 148 mg/dl
Blood Pressure: 72 mmHg
Skin Thickness: 35 mm
Insulin: 94
BMI: 33.6
Diabetes Pedigree Function: 0.627
Age: 50"""

KIDNEY_REPORT_TEXT = """KIDNEY FUNCTION TEST
Age: 48
Blood Pressure: 80 mmHg
Specific Gravity: 1.020
Albumin: 1
Sugar: 0
RBC normal
PC normal
PCC notpresent
BA notpresent
Blood Glucose Random: 121 mg/dl
Blood Urea Nitrogen: 36
Serum Creatinine: 1.2 mg/dl
Sodium: 137 mEq/L
Potassium: 4.6 mEq/L
Hemoglobin: 15.4 g/dl
Packed Cell Volume: 44
White Blood Cell Count: 7800
Red Blood Cell Count: 5.2
Hypertension: yes
DM: no
CAD: no
Good appetite
Pedal Edema: no
Anemia: no"""


def _pdf_with_pages(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def liver_report_text() -> str:
    return LIVER_REPORT_TEXT


@pytest.fixture()
def heart_report_text() -> str:
    return HEART_REPORT_TEXT


@pytest.fixture()
def diabetes_report_text() -> str:
    return DIABETES_REPORT_TEXT


@pytest.fixture()
def kidney_report_text() -> str:
    return KIDNEY_REPORT_TEXT


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_with_pages([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf_with_pages([["Page one content"], ["Page two content"]])


@pytest.fixture()
def four_page_pdf_bytes() -> bytes:
    """Generate a PDF with one more page than the default page limit."""
    return _pdf_with_pages(
        [
            ["Page one content"],
            ["Page two content"],
            ["Page three content"],
            ["Page four content"],
        ]
    )


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def liver_report_pdf_bytes() -> bytes:
    """Generate a one-page liver function test report."""
    return _pdf_with_pages([LIVER_REPORT_TEXT.split("\n")])


@pytest.fixture()
def blank_png_bytes() -> bytes:
    """Generate a small white PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", (40, 20), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def liver_report_on_page_four_pdf_bytes() -> bytes:
    """Generate a PDF whose only report content sits beyond the default page limit."""
    return _pdf_with_pages(
        [["Patient summary"], ["Notes"], ["Notes"], LIVER_REPORT_TEXT.split("\n")]
    )
