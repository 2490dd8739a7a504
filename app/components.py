import streamlit as st
from st_keyup import st_keyup  # type: ignore

from letter_arithmetic.bitmap import encode_png
from letter_arithmetic.expression import Expression
from letter_arithmetic.parser import GRAMMAR, SYNTAX_REFERENCE
from letter_arithmetic.printer import polish, pretty, repr_expression
from letter_arithmetic.renderer import RenderResult


def expression_input() -> str:
    """Key-up text input; the script reruns on every keystroke.

    Bumping ``input_version`` recreates the widget so a rewritten
    ``st.session_state["text"]`` (e.g. after "Pretty") shows up in the box.
    """
    value: str = (
        st_keyup(
            "Expression",
            value=st.session_state["text"],
            key=f"expression_{st.session_state['input_version']}",
            placeholder="expression",
            label_visibility="collapsed",
        )
        or ""
    )
    st.session_state["text"] = value
    return value


def replace_input_text(text: str) -> None:
    st.session_state["text"] = text
    st.session_state["input_version"] += 1
    st.rerun()


def display_render_result(result: RenderResult) -> None:
    if result.bitmap is None:
        st.error(result.match.message, icon="⚠️")
        return
    st.image(result.bitmap)
    st.download_button(
        "⬇️ Download PNG",
        data=encode_png(result.bitmap),
        file_name="expression.png",
        mime="image/png",
        key="download_btn",
    )


def display_textual_forms(expression: Expression) -> None:
    st.text("Call form")
    st.code(repr_expression(expression), language=None)
    st.text("Prefix form")
    st.code(polish(expression), language=None)
    if st.button("✨ Pretty", key="pretty_btn", use_container_width=True):
        replace_input_text(pretty(expression))


def display_syntax_reference() -> None:
    st.subheader("Syntax Reference")
    st.code(SYNTAX_REFERENCE, language=None)
    with st.expander("Grammar Definition"):
        st.code(GRAMMAR, language=None)
