"""
Streamlit presentation of the neurobiological applications of IIT.

This module lays out a single scrolling page with four sections:
- Thalamocortical vs. cerebellum architectures as one two-panel comparison figure
- A schematic of the dynamic core and its informationally insulated ports
- An interactive split-brain toggle that severs the corpus callosum
- The reference list

Run with: streamlit run viz/app_streamlit.py
"""

import os
import sys

# Add project root to Python path BEFORE any imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import matplotlib.pyplot as plt
import streamlit as st

from iit_core.config import CEREBELLUM_COLOR, THALAMOCORTICAL_COLOR, RenderStyle
from iit_core.datasets import cerebellum, thalamocortical
from viz import content
from viz.utils import comparison_figure, dynamic_core_figure, split_brain_caption, split_brain_figure

st.set_page_config(layout="centered", page_title="Neurobiological Applications of IIT")

plt.style.use("seaborn-v0_8-whitegrid")


def show_figure(fig):
    st.pyplot(fig, use_container_width=True)
    plt.close(fig)


st.title(content.TITLE)
st.caption(content.INTRO)

# 1. Architectures
st.header(content.ARCHITECTURE_HEADER)
st.write(content.ARCHITECTURE_TEXT)
for bullet in content.ARCHITECTURE_BULLETS:
    st.markdown(f"- {bullet}")

show_figure(
    comparison_figure(
        (thalamocortical(), RenderStyle(color=THALAMOCORTICAL_COLOR, title=content.THALAMOCORTICAL_TITLE)),
        (cerebellum(), RenderStyle(color=CEREBELLUM_COLOR, title=content.CEREBELLUM_TITLE)),
    )
)

st.divider()

# 2. Dynamic core
st.header(content.DYNAMIC_CORE_HEADER)
st.write(content.DYNAMIC_CORE_TEXT)
show_figure(dynamic_core_figure())
st.write(content.DYNAMIC_CORE_FOOTER)

st.divider()

# 3. Split brain
st.header(content.SPLIT_BRAIN_HEADER)
st.write(content.SPLIT_BRAIN_TEXT)
severed = st.toggle(f"**{content.SPLIT_TOGGLE_LABEL}**", value=False)
show_figure(split_brain_figure(severed))
st.caption(split_brain_caption(severed))

st.divider()

# References
st.header("References")
for reference in content.REFERENCES:
    st.caption(reference)
