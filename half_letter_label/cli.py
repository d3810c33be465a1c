"""
CLI entry points for half-letter label conversion.
"""

# Standard Library
import argparse
import pathlib
import time

# local repo modules
import half_letter_label as hll
import half_letter_label.config
import half_letter_label.pdf_lib
import half_letter_label.preview
import half_letter_label.render


ConversionOptions = hll.config.ConversionOptions

POINTS_PER_INCH = hll.config.POINTS_PER_INCH


#============================================
def build_options(args: argparse.Namespace) -> ConversionOptions:
	"""
	Build conversion options from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		ConversionOptions.
	"""
	return ConversionOptions(
		auto_rotate=args.auto_rotate,
		duplicate=args.duplicate,
		use_cropbox=args.use_cropbox,
	)


#============================================
def resolve_output_path(args: argparse.Namespace) -> pathlib.Path:
	"""
	Pick the output path, defaulting to a name beside the input.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Output PDF path.
	"""
	if args.output_path:
		return pathlib.Path(args.output_path)
	input_path = pathlib.Path(args.input_path)
	return input_path.parent / hll.pdf_lib.build_output_name(input_path.name)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Optional argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(
		description="Place a 4x5 shipping label PDF on the top half of a US Letter page."
	)
	parser.add_argument("input_path", help="Label PDF; only the first page is used.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PDF path.")
	output_group.add_argument("--preview", dest="preview_path", default=None, help="Also write a PNG preview.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-r", "--auto-rotate", dest="auto_rotate", action="store_true", help="Rotate when orientations differ.")
	behavior_group.add_argument("-R", "--no-auto-rotate", dest="auto_rotate", action="store_false", help="Never rotate.")
	behavior_group.add_argument("-d", "--duplicate", dest="duplicate", action="store_true", help="Place the label on both halves.")
	behavior_group.add_argument("-D", "--no-duplicate", dest="duplicate", action="store_false", help="Top half only.")
	behavior_group.add_argument("-c", "--use-cropbox", dest="use_cropbox", action="store_true", help="Measure the CropBox instead of the MediaBox.")

	parser.set_defaults(
		auto_rotate=True,
		duplicate=False,
		use_cropbox=False,
	)

	args = parser.parse_args(argv)
	return args


#============================================
def run_pipeline(args: argparse.Namespace) -> pathlib.Path:
	"""
	Convert one label file and report what was done.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Output PDF path.
	"""
	output_path = resolve_output_path(args)
	options = build_options(args)
	print("Label to half-letter conversion")
	print(f"Input PDF: {args.input_path}")
	print(f"Output PDF: {output_path}")
	print(f"Auto-rotate: {options.auto_rotate}")
	print(f"Duplicate: {options.duplicate}")
	if options.use_cropbox:
		print("Page box: CropBox")

	start_time = time.perf_counter()
	result = hll.render.convert_file(pathlib.Path(args.input_path), output_path, options)
	source = result.source
	placement = result.placement
	print(
		"Source page: {:.1f} x {:.1f} pt ({:.2f} x {:.2f} in)".format(
			source.width,
			source.height,
			source.width / POINTS_PER_INCH,
			source.height / POINTS_PER_INCH,
		)
	)
	print(f"Rotation: {placement.rotation_degrees} deg")
	print(f"Scale: {placement.scale:.4f}")
	print(f"Halves filled: {result.halves_filled}")

	if args.preview_path:
		png_bytes = hll.preview.render_preview_png(result.pdf_bytes)
		pathlib.Path(args.preview_path).write_bytes(png_bytes)
		print(f"Preview written: {args.preview_path}")

	total_time = time.perf_counter() - start_time
	print(f"Timing: total={total_time:.2f}s")
	return output_path


#============================================
def main() -> None:
	"""
	Main entry point.
	"""
	args = parse_args()
	run_pipeline(args)
