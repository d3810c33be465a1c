"""
Raster previews of converted pages.
"""

# Standard Library
import io

# PIP3 modules
import fitz
import PIL.Image

# local repo modules
import half_letter_label as hll
import half_letter_label.config


PREVIEW_DPI = hll.config.PREVIEW_DPI


#============================================
def render_preview_image(pdf_bytes: bytes, dpi: int = PREVIEW_DPI) -> PIL.Image.Image:
	"""
	Render the first page of a PDF to an image.

	Args:
		pdf_bytes: PDF bytes.
		dpi: Render resolution.

	Returns:
		PIL image in RGB mode.
	"""
	document = fitz.open(stream=pdf_bytes, filetype="pdf")
	try:
		page = document[0]
		scale = dpi / hll.config.POINTS_PER_INCH
		matrix = fitz.Matrix(scale, scale)
		pixmap = page.get_pixmap(matrix=matrix, alpha=False)
		image = PIL.Image.frombytes("RGB", [pixmap.width, pixmap.height], pixmap.samples)
	finally:
		document.close()
	return image


#============================================
def render_preview_png(pdf_bytes: bytes, dpi: int = PREVIEW_DPI) -> bytes:
	"""
	Render the first page of a PDF as PNG bytes.
	"""
	image = render_preview_image(pdf_bytes, dpi)
	buffer = io.BytesIO()
	image.save(buffer, format="PNG")
	return buffer.getvalue()
