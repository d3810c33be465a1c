"""
Browser front end: streamlit run app.py
"""

# PIP3 modules
import streamlit as st

# local repo modules
import half_letter_label as hll
import half_letter_label.config
import half_letter_label.pdf_lib
import half_letter_label.preview
import half_letter_label.render


st.set_page_config(page_title="Label to Half Letter", page_icon="📦", layout="centered")
st.title("Label to Half Letter")
st.write(
	"Places the first page of a **4\" × 5\"** shipping label PDF on the top half of a "
	"**US Letter** page, scaled to fit with a cut guide across the middle."
)

uploaded = st.file_uploader("Label PDF", type=["pdf"])
auto_rotate = st.checkbox("Auto-rotate to fit", value=True)
duplicate = st.checkbox("Duplicate on both halves", value=False)

if st.button("Convert", disabled=uploaded is None):
	options = hll.config.ConversionOptions(auto_rotate=auto_rotate, duplicate=duplicate)
	try:
		result = hll.render.render_half_letter(uploaded.getvalue(), options)
	except Exception as error:
		st.error(f"Conversion failed: {error}")
	else:
		out_name = hll.pdf_lib.build_output_name(uploaded.name)
		st.success(hll.config.SUCCESS_MESSAGE)
		st.balloons()
		st.download_button(
			"Download half-letter PDF",
			data=result.pdf_bytes,
			file_name=out_name,
			mime="application/pdf",
		)
		st.image(hll.preview.render_preview_image(result.pdf_bytes), caption=out_name)
elif uploaded is None:
	st.caption("Print at 100% (actual size) and cut along the gray line.")
