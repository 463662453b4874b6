# FrontEnd/app.py

"""
Streamlit Frontend for the Flowchart Agent.
Paste or upload text, simplify it into flowchart nodes, draw them on the canvas.
The session (nodes, info artifacts, canvas) lives in st.session_state only.
"""

import streamlit as st
import os
import sys

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from flowchart_agent import FlowchartAgent
from flowchart_generator import GraphvizCanvas
from llm_client import llm_client
from text_source import load_source_text, TextSourceError


def _session():
    if "agent" not in st.session_state:
        st.session_state.agent = FlowchartAgent()
    if "canvas" not in st.session_state:
        st.session_state.canvas = GraphvizCanvas()
    return st.session_state.agent, st.session_state.canvas


def main():
    st.set_page_config(page_title="Flowchart Agent", page_icon="🧭", layout="wide")

    st.title("🧭 Text Simplifier & Flowchart Creator")
    st.markdown("Break text down into steps and lay them out as a flowchart.")

    agent, canvas = _session()

    # ── Sidebar ──
    with st.sidebar:
        st.header("⚙️ Configuration")

        if llm_client.has_credentials():
            st.success("✓ API key configured")
            st.caption(f"Model: `{llm_client.config.model}`")
            st.caption(f"Server: `{llm_client.config.base_url}`")
        else:
            st.warning("No API key — sentence-split fallback")
            st.caption("Set `DEEPSEEK_API_KEY` to use the LLM.")

        st.markdown("---")

        input_method = st.radio(
            "📝 Text Input",
            ["Paste Text", "Upload File"],
            index=0
        )
        connectors = st.checkbox("Connect consecutive steps", value=False)

        st.markdown("---")
        st.markdown("### Pipeline")
        st.markdown("""
        1. Break text into flowchart nodes
        2. Summary, title & key statistics
        3. Lay out boxes on the canvas
        """)

    # ── Main Content ──
    col1, col2 = st.columns([1, 1])

    with col1:
        st.header("📁 Input")
        input_text = ""

        if input_method == "Paste Text":
            input_text = st.text_area(
                "Text",
                height=250,
                placeholder="Enter text to simplify and convert to flowchart..."
            )
        else:
            upload = st.file_uploader("Upload File", type=["txt", "md", "pdf"])
            if upload:
                try:
                    input_text = load_source_text(upload.name, upload.getvalue())
                except TextSourceError as e:
                    st.error(str(e))
                if input_text:
                    with st.expander("Preview", expanded=False):
                        st.text(input_text[:3000])
                    st.success(f"✓ {len(input_text):,} characters loaded")

        b1, b2, b3, b4 = st.columns(4)
        simplify = b1.button(
            "Simplify Text", type="primary",
            disabled=not input_text.strip(), use_container_width=True
        )
        create = b2.button(
            "Create Flowchart", disabled=not agent.nodes, use_container_width=True
        )
        info = b3.button(
            "Add Info Boxes", disabled=agent.summary is None, use_container_width=True
        )
        clear = b4.button("Clear Canvas", use_container_width=True)

    if simplify:
        with st.spinner("Simplifying..."):
            agent.simplify(input_text)
        st.rerun()
    if create:
        agent.create_flowchart(canvas, connectors=connectors)
    if info:
        agent.create_info_boxes(canvas)
    if clear:
        canvas.clear()

    with col2:
        st.header("📊 Output")

        if agent.error:
            st.error(agent.error)

        if agent.title is not None and agent.title.value.title:
            st.subheader(agent.title.value.title)

        if agent.simplified_text:
            source = "LLM" if agent.nodes_from_service else "local fallback"
            st.caption(f"{len(agent.nodes)} nodes ({source})")
            with st.expander("Simplified Text", expanded=True):
                st.code(agent.simplified_text, language="json")

        if len(canvas):
            png = canvas.render_png()
            if png:
                st.image(png, caption="Canvas")
                st.download_button(
                    label="📥 Download PNG",
                    data=png,
                    file_name="flowchart.png",
                    mime="image/png",
                    use_container_width=True
                )
            else:
                st.error("Canvas could not be rendered (is Graphviz installed?)")


if __name__ == "__main__":
    main()
