"""
Compose a label page onto a US Letter sheet.
"""

# Standard Library
import io
import pathlib

# PIP3 modules
import pypdf
import reportlab.pdfgen.canvas

# local repo modules
import half_letter_label as hll
import half_letter_label.config
import half_letter_label.layout
import half_letter_label.pdf_lib


ConversionOptions = hll.config.ConversionOptions
ConversionResult = hll.config.ConversionResult

LETTER_WIDTH = hll.config.LETTER_WIDTH
LETTER_HEIGHT = hll.config.LETTER_HEIGHT
HALF_HEIGHT = hll.config.HALF_HEIGHT
DIVIDER_HEIGHT = hll.config.DIVIDER_HEIGHT
DIVIDER_GRAY = hll.config.DIVIDER_GRAY
DIVIDER_ALPHA = hll.config.DIVIDER_ALPHA


#============================================
def draw_divider(pdf: reportlab.pdfgen.canvas.Canvas) -> None:
	"""
	Draw the cut guide across the half-page boundary.

	Args:
		pdf: ReportLab canvas.
	"""
	pdf.setFillColorRGB(DIVIDER_GRAY[0], DIVIDER_GRAY[1], DIVIDER_GRAY[2])
	pdf.setFillAlpha(DIVIDER_ALPHA)
	divider_y = HALF_HEIGHT - DIVIDER_HEIGHT / 2.0
	pdf.rect(0.0, divider_y, LETTER_WIDTH, DIVIDER_HEIGHT, stroke=0, fill=1)


#============================================
def build_divider_overlay() -> pypdf.PageObject:
	"""
	Build a Letter page holding only the cut guide.

	Returns:
		PDF page object.
	"""
	buffer = io.BytesIO()
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=(LETTER_WIDTH, LETTER_HEIGHT))
	draw_divider(pdf)
	pdf.save()
	buffer.seek(0)
	reader = pypdf.PdfReader(buffer)
	return reader.pages[0]


#============================================
def render_half_letter(pdf_bytes: bytes, options: ConversionOptions) -> ConversionResult:
	"""
	Lay the first page of a label PDF onto the top half of a Letter page.

	Args:
		pdf_bytes: Source PDF bytes.
		options: Conversion options.

	Returns:
		ConversionResult with the output bytes and the top-half placement.
	"""
	reader = hll.pdf_lib.load_source_document(pdf_bytes)
	source_page, source = hll.pdf_lib.read_source_page(reader, options.use_cropbox)

	regions = [hll.config.top_half_region()]
	if options.duplicate:
		regions.append(hll.config.bottom_half_region())

	writer = pypdf.PdfWriter()
	page = writer.add_blank_page(width=LETTER_WIDTH, height=LETTER_HEIGHT)

	placements = []
	for region in regions:
		placement = hll.layout.compute_placement(source, region, options.auto_rotate)
		transform = hll.layout.build_transformation(source, placement)
		page.merge_transformed_page(source_page, transform)
		placements.append(placement)

	page.merge_page(build_divider_overlay())

	buffer = io.BytesIO()
	writer.write(buffer)
	return ConversionResult(
		pdf_bytes=buffer.getvalue(),
		source=source,
		placement=placements[0],
		halves_filled=len(placements),
	)


#============================================
def convert_to_half_letter(pdf_bytes: bytes, options: ConversionOptions) -> bytes:
	"""
	Convert label PDF bytes into half-letter PDF bytes.

	Args:
		pdf_bytes: Source PDF bytes.
		options: Conversion options.

	Returns:
		Output PDF bytes.
	"""
	result = render_half_letter(pdf_bytes, options)
	return result.pdf_bytes


#============================================
def convert_file(
	input_path: pathlib.Path,
	output_path: pathlib.Path,
	options: ConversionOptions,
) -> ConversionResult:
	"""
	Convert a label PDF file and write the result.

	The output file is only written once the whole document is built.

	Args:
		input_path: Source PDF path.
		output_path: Output PDF path.
		options: Conversion options.

	Returns:
		ConversionResult.
	"""
	pdf_bytes = pathlib.Path(input_path).read_bytes()
	result = render_half_letter(pdf_bytes, options)
	pathlib.Path(output_path).write_bytes(result.pdf_bytes)
	return result
