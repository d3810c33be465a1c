"""
Pytest configuration for local imports and label PDF fixtures.
"""

# Standard Library
import io
import os
import sys

# PIP3 modules
import pytest
import reportlab.pdfgen.canvas

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

MARKER_SIZE = 20.0


#============================================
def build_label_pdf(width: float, height: float, fill: bool = True, marker: bool = False) -> bytes:
	"""
	Build a one-page label PDF with ReportLab.

	Args:
		width: Page width in points.
		height: Page height in points.
		fill: Paint the whole page black.
		marker: Paint a black square in the top-left corner.

	Returns:
		PDF bytes.
	"""
	buffer = io.BytesIO()
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=(width, height))
	pdf.setFillColorRGB(0.0, 0.0, 0.0)
	if fill:
		pdf.rect(0.0, 0.0, width, height, stroke=0, fill=1)
	if marker:
		pdf.rect(0.0, height - MARKER_SIZE, MARKER_SIZE, MARKER_SIZE, stroke=0, fill=1)
	pdf.showPage()
	pdf.save()
	return buffer.getvalue()


@pytest.fixture
def portrait_label_pdf() -> bytes:
	"""
	Solid 4x5 inch portrait label.
	"""
	return build_label_pdf(288.0, 360.0)


@pytest.fixture
def landscape_label_pdf() -> bytes:
	"""
	Solid 5x4 inch landscape label.
	"""
	return build_label_pdf(360.0, 288.0)


@pytest.fixture
def marked_label_pdf() -> bytes:
	"""
	Blank 4x5 inch label with a top-left corner marker.
	"""
	return build_label_pdf(288.0, 360.0, fill=False, marker=True)
