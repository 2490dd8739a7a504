import streamlit as st

from config import (
    AppConfig,
    get_config_from_widgets,
    make_renderer,
    set_default_config,
)
from components import (
    display_render_result,
    display_syntax_reference,
    display_textual_forms,
    expression_input,
)
from letter_arithmetic.exceptions import RasterizationError
from letter_arithmetic.publish import LatestResultSink
from letter_arithmetic.renderer import RenderResult

st.set_page_config(layout="wide", page_title="Arithmetic of Letters")


# --------- Main App ---------

set_default_config()

with st.sidebar:
    config: AppConfig = get_config_from_widgets()
    st.session_state["config"] = config
    st.divider()
    display_syntax_reference()

st.title("Arithmetic of Letters")

left_col, right_col = st.columns([0.75, 0.25])

with left_col:
    text = expression_input()

    sink: LatestResultSink[RenderResult] = st.session_state["sink"]
    request_id = sink.begin()
    try:
        result = make_renderer(config).render_text(text)
    except RasterizationError as e:
        st.error(f"Render failed: {e}", icon="🚫")
        st.stop()
    sink.commit(request_id, result)

    latest = sink.latest
    if latest is not None:
        display_render_result(latest)

with right_col:
    if latest is not None and latest.match.expression is not None:
        display_textual_forms(latest.match.expression)
