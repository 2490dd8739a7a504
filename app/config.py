from dataclasses import dataclass
from typing import List

import streamlit as st

from letter_arithmetic.colors import COLOR_STRATEGY_REGISTRY, DEFAULT_COLOR_STRATEGY
from letter_arithmetic.publish import LatestResultSink
from letter_arithmetic.renderer import (
    DEFAULT_EXPRESSION,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    ExpressionRenderer,
    RenderResult,
)


@dataclass(frozen=True)
class AppConfig:
    font_size: int
    font_family: str
    color_strategy: str


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig(
            font_size=DEFAULT_FONT_SIZE,
            font_family=DEFAULT_FONT_FAMILY,
            color_strategy=DEFAULT_COLOR_STRATEGY,
        )
        st.session_state["text"] = DEFAULT_EXPRESSION
        st.session_state["input_version"] = 0
        st.session_state["sink"] = LatestResultSink[RenderResult]()


def get_config_from_widgets() -> AppConfig:
    config: AppConfig = st.session_state["config"]

    font_size: int = st.slider(
        "Font Size", 2, 1000, config.font_size, key="font_size"
    )
    strategy_names: List[str] = list(COLOR_STRATEGY_REGISTRY.keys())
    color_strategy: str = st.selectbox(
        "Color Palette",
        strategy_names,
        index=strategy_names.index(config.color_strategy),
        key="color_strategy",
    )
    font_family: str = st.text_input(
        "Font Family",
        value=config.font_family,
        help="Comma separated, tried in order. Generic families use the built-in font.",
        key="font_family",
    )
    return AppConfig(
        font_size=font_size,
        font_family=font_family or DEFAULT_FONT_FAMILY,
        color_strategy=color_strategy,
    )


def make_renderer(config: AppConfig) -> ExpressionRenderer:
    return ExpressionRenderer.from_strategy_name(
        config.color_strategy,
        font_size=config.font_size,
        font_family=config.font_family,
    )
