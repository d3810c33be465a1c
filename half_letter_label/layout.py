"""
Fit, rotate and center geometry for placing a label page on a half page.

All values are PDF points with the origin at the lower-left page corner.
The drawing primitive is pypdf.Transformation, whose rotate() turns
counter-clockwise about the origin: (x, y) -> (-y, x) for 90 degrees.
"""

# PIP3 modules
import pypdf

# local repo modules
import half_letter_label as hll
import half_letter_label.config


SourcePage = hll.config.SourcePage
TargetRegion = hll.config.TargetRegion
Placement = hll.config.Placement

LETTER_WIDTH = hll.config.LETTER_WIDTH
MARGIN_FRACTION = hll.config.MARGIN_FRACTION


class DegenerateGeometryError(ValueError):
	"""
	Raised when a page or region has a non-positive width or height.
	"""


#============================================
def is_landscape(width: float, height: float) -> bool:
	"""
	Check whether a box is wider than it is tall.

	Args:
		width: Box width.
		height: Box height.

	Returns:
		True for landscape boxes. Square boxes are not landscape.
	"""
	return width > height


#============================================
def validate_extents(name: str, width: float, height: float) -> None:
	"""
	Reject boxes that cannot be scaled.

	Args:
		name: Label used in the error message.
		width: Box width.
		height: Box height.
	"""
	if width <= 0.0 or height <= 0.0:
		raise DegenerateGeometryError(
			f"invalid {name}: {width:.2f} x {height:.2f} pt, both extents must be positive"
		)


#============================================
def choose_rotation(source: SourcePage, region: TargetRegion, auto_rotate: bool) -> int:
	"""
	Pick 0 or 90 degrees by orientation parity.

	Only the landscape/portrait classification is compared, not the
	resulting scale.

	Args:
		source: Source page size.
		region: Target region size.
		auto_rotate: Whether rotation is allowed.

	Returns:
		Rotation in degrees.
	"""
	if not auto_rotate:
		return 0
	source_landscape = is_landscape(source.width, source.height)
	region_landscape = is_landscape(region.width, region.height)
	if source_landscape != region_landscape:
		return 90
	return 0


#============================================
def rotated_extents(width: float, height: float, rotation_degrees: int) -> tuple[float, float]:
	"""
	Width and height of a box after a quarter-turn rotation.
	"""
	if rotation_degrees % 180 == 0:
		return (width, height)
	return (height, width)


#============================================
def compute_placement(
	source: SourcePage,
	region: TargetRegion,
	auto_rotate: bool,
	page_width: float = LETTER_WIDTH,
	margin_fraction: float = MARGIN_FRACTION,
) -> Placement:
	"""
	Compute the largest centered placement of a source page in a region.

	The usable area is the region shrunk by margin_fraction on each axis.
	The rendered box is centered horizontally on the full page width and
	vertically within the region.

	Args:
		source: Source page size.
		region: Target region on the output page.
		auto_rotate: Allow a 90 degree turn when orientations differ.
		page_width: Full output page width for horizontal centering.
		margin_fraction: Fraction of each region extent kept as margin.

	Returns:
		Placement.
	"""
	validate_extents("source page", source.width, source.height)
	validate_extents("target region", region.width, region.height)
	if not 0.0 <= margin_fraction < 1.0:
		raise ValueError(f"margin fraction must be in [0, 1), got {margin_fraction}")

	rotation = choose_rotation(source, region, auto_rotate)

	max_width = region.width * (1.0 - margin_fraction)
	max_height = region.height * (1.0 - margin_fraction)
	effective_width, effective_height = rotated_extents(source.width, source.height, rotation)
	scale = min(max_width / effective_width, max_height / effective_height)

	draw_width = source.width * scale
	draw_height = source.height * scale
	render_width, render_height = rotated_extents(draw_width, draw_height, rotation)

	origin_x = (page_width - render_width) / 2.0
	origin_y = region.bottom + (region.height - render_height) / 2.0

	return Placement(
		rotation_degrees=rotation,
		scale=scale,
		draw_width=draw_width,
		draw_height=draw_height,
		render_width=render_width,
		render_height=render_height,
		origin_x=origin_x,
		origin_y=origin_y,
	)


#============================================
def compute_anchor(placement: Placement) -> tuple[float, float]:
	"""
	Translation applied after rotation so the rendered box starts at the origin.

	A counter-clockwise quarter turn maps [0, dw] x [0, dh] onto
	[-dh, 0] x [0, dw], so the box must shift right by its rendered width.

	Args:
		placement: Computed placement.

	Returns:
		Tuple of (x, y).
	"""
	if placement.rotation_degrees % 180 == 0:
		return (placement.origin_x, placement.origin_y)
	return (placement.origin_x + placement.render_width, placement.origin_y)


#============================================
def build_transformation(source: SourcePage, placement: Placement) -> pypdf.Transformation:
	"""
	Build the pypdf transform that draws the source page at the placement.

	Args:
		source: Source page with its box corner.
		placement: Computed placement.

	Returns:
		pypdf Transformation.
	"""
	anchor_x, anchor_y = compute_anchor(placement)
	transform = pypdf.Transformation().translate(-source.left, -source.bottom)
	transform = transform.scale(placement.scale, placement.scale)
	if placement.rotation_degrees:
		transform = transform.rotate(placement.rotation_degrees)
	return transform.translate(anchor_x, anchor_y)
