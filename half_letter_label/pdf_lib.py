"""
Source PDF loading and validation.
"""

# Standard Library
import io
import pathlib

# PIP3 modules
import pypdf
import pypdf.errors
import pypdf.generic

# local repo modules
import half_letter_label as hll
import half_letter_label.config
import half_letter_label.layout


SourcePage = hll.config.SourcePage
DegenerateGeometryError = hll.layout.DegenerateGeometryError

OUTPUT_SUFFIX = hll.config.OUTPUT_SUFFIX
DEFAULT_OUTPUT_BASE = hll.config.DEFAULT_OUTPUT_BASE


class InvalidInputError(ValueError):
	"""
	Raised when the input is not a loadable PDF or has no pages.
	"""


#============================================
def load_source_document(pdf_bytes: bytes) -> pypdf.PdfReader:
	"""
	Parse PDF bytes into a reader.

	Args:
		pdf_bytes: Raw PDF bytes.

	Returns:
		pypdf reader with at least one page.
	"""
	if not pdf_bytes:
		raise InvalidInputError("input is empty")
	try:
		reader = pypdf.PdfReader(io.BytesIO(pdf_bytes))
		page_count = len(reader.pages)
	except (pypdf.errors.PyPdfError, ValueError) as error:
		raise InvalidInputError(f"input is not a readable PDF: {error}") from error
	if page_count == 0:
		raise InvalidInputError("PDF has no pages")
	return reader


#============================================
def get_page_box(page: pypdf.PageObject, use_cropbox: bool) -> pypdf.generic.RectangleObject:
	"""
	Select the page box used for placement.

	Args:
		page: pypdf page.
		use_cropbox: Use the CropBox instead of the MediaBox.

	Returns:
		Rectangle object.
	"""
	if use_cropbox and page.cropbox is not None:
		return page.cropbox
	return page.mediabox


#============================================
def read_source_page(
	reader: pypdf.PdfReader,
	use_cropbox: bool = False,
) -> tuple[pypdf.PageObject, SourcePage]:
	"""
	Read the first page and its size.

	Args:
		reader: pypdf reader.
		use_cropbox: Measure the CropBox instead of the MediaBox.

	Returns:
		Tuple of (page, SourcePage).
	"""
	page = reader.pages[0]
	box = get_page_box(page, use_cropbox)
	left = float(box.left)
	bottom = float(box.bottom)
	width = float(box.right) - left
	height = float(box.top) - bottom
	if width <= 0.0 or height <= 0.0:
		raise DegenerateGeometryError(
			f"invalid source page: {width:.2f} x {height:.2f} pt"
		)
	source = SourcePage(width=width, height=height, left=left, bottom=bottom)
	return (page, source)


#============================================
def build_output_name(input_name: str | None) -> str:
	"""
	Derive the download name for a converted label.

	Args:
		input_name: Uploaded or input file name, may include directories.

	Returns:
		File name ending in -half-letter.pdf.
	"""
	base = pathlib.PurePath(input_name or "").name
	if base.lower().endswith(".pdf"):
		base = base[:-4]
	if not base:
		base = DEFAULT_OUTPUT_BASE
	return f"{base}{OUTPUT_SUFFIX}"
