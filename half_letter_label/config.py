"""
Shared configuration and constants.
"""

import dataclasses

# PIP3 modules
import reportlab.lib.pagesizes


POINTS_PER_INCH = 72.0
LETTER_WIDTH, LETTER_HEIGHT = reportlab.lib.pagesizes.letter
HALF_HEIGHT = LETTER_HEIGHT / 2.0

MARGIN_FRACTION = 0.20

DIVIDER_HEIGHT = 0.5
DIVIDER_GRAY = (0.75, 0.75, 0.75)
DIVIDER_ALPHA = 0.6

OUTPUT_SUFFIX = "-half-letter.pdf"
DEFAULT_OUTPUT_BASE = "label"
PREVIEW_DPI = 96
SUCCESS_MESSAGE = "Generated! Congrats on the sale bun!"


@dataclasses.dataclass(frozen=True)
class SourcePage:
	width: float
	height: float
	left: float = 0.0
	bottom: float = 0.0


@dataclasses.dataclass(frozen=True)
class TargetRegion:
	width: float
	height: float
	bottom: float = 0.0


@dataclasses.dataclass(frozen=True)
class Placement:
	rotation_degrees: int
	scale: float
	draw_width: float
	draw_height: float
	render_width: float
	render_height: float
	origin_x: float
	origin_y: float


@dataclasses.dataclass
class ConversionOptions:
	auto_rotate: bool
	duplicate: bool = False
	use_cropbox: bool = False


@dataclasses.dataclass
class ConversionResult:
	pdf_bytes: bytes
	source: SourcePage
	placement: Placement
	halves_filled: int


#============================================
def top_half_region() -> TargetRegion:
	"""
	Region covering the upper half of a Letter page.
	"""
	return TargetRegion(width=LETTER_WIDTH, height=HALF_HEIGHT, bottom=HALF_HEIGHT)


#============================================
def bottom_half_region() -> TargetRegion:
	"""
	Region covering the lower half of a Letter page.
	"""
	return TargetRegion(width=LETTER_WIDTH, height=HALF_HEIGHT, bottom=0.0)
