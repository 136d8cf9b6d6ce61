from __future__ import annotations
import streamlit as st
import re
import logging
import pandas as pd
import numpy as np
from typing import List
import matplotlib.pyplot as plt
import networkx as nx
import io

from news_summarizer.summarize import summarize, generate_summary
from news_summarizer.segmentation import inspect_segmentation, SegmentConfig
from news_summarizer.scoring import score_sentences, explain_score
from news_summarizer.selection import selection_trace
from news_summarizer.datatypes import SentenceCandidate, ScoredSentence, SelectionStep


REASON_LABELS = {
    "too_short": "Too short",
    "too_long": "Too long",
    "title": "Title-like line",
    "single_word": "No whitespace",
}

def extract_rtf_text(rtf_content):
    """Extract plain text from RTF content."""
    # \par marks a paragraph; keep it as a blank line
    text = re.sub(r'\\par[d]?\b', '\n\n', rtf_content)
    text = re.sub(r'\\[a-z]+-?\d*', '', text)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[ \t]+', ' ', text)
    text = re.sub(r'\s*\n\s*\n\s*', '\n\n', text)
    return text.strip()

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    # Code blocks first, their contents are not prose
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    # Headers lose their markers but stay on their own line (filtered as titles later)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8")

    if file_extension == 'rtf':
        return extract_rtf_text(content)
    elif file_extension == 'md':
        return extract_markdown_text(content)
    else:
        return content

def preview(text: str, n: int = 80) -> str:
    return text[:n] + "..." if len(text) > n else text

def draw_selection_path(scored: List[ScoredSentence], steps: List[SelectionStep]):
    """Plot sentences by paragraph and position, with the selection order as a directed path."""
    G = nx.DiGraph()
    for s in scored:
        G.add_node(s.sequence_index, paragraph=s.paragraph_index, score=s.score)
    picked = [step.sentence.sequence_index for step in steps]
    for a, b in zip(picked, picked[1:]):
        G.add_edge(a, b)

    # x = position in document, y = paragraph (top to bottom)
    pos = {s.sequence_index: (s.sequence_index, -s.paragraph_index) for s in scored}

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.set_title("Selection Path (seed -> last pick)", fontsize=14, fontweight='bold')

    others = [n for n in G.nodes if n not in picked]
    nx.draw_networkx_nodes(G, pos, nodelist=others, ax=ax,
                           node_color='lightgray', node_size=500, alpha=0.7)
    if picked:
        nx.draw_networkx_nodes(G, pos, nodelist=picked[:1], ax=ax,
                               node_color='gold', node_size=800)
        nx.draw_networkx_nodes(G, pos, nodelist=picked[1:], ax=ax,
                               node_color='lightblue', node_size=700)
    nx.draw_networkx_edges(G, pos, ax=ax, width=2, edge_color='steelblue',
                           arrows=True, arrowsize=18, connectionstyle='arc3,rad=0.2')
    labels = {n: f"S{n+1}" for n in G.nodes}
    nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=9, font_weight='bold')

    ax.set_xlabel("Sentence position")
    ax.set_ylabel("Paragraph")
    ax.tick_params(left=True, bottom=True, labelleft=True, labelbottom=True)
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)

    return buf

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    num_sentences = st.sidebar.slider(
        "Summary sentences",
        min_value=1,
        max_value=10,
        value=3,
        step=1,
        help="Number of sentences to extract"
    )

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")

    return num_sentences, debug_mode

def debug_pipeline(text: str, num_sentences: int):
    """Run the pipeline with detailed debugging information."""

    # Step 1: Segmentation
    st.header("Step 1: Segmentation")
    with st.expander("Segmentation Details", expanded=True):
        st.write("**Running:** Abbreviation masking, paragraph split, sentence split, title/length filtering")

        with st.spinner("Segmenting text..."):
            cfg = SegmentConfig()
            reports = inspect_segmentation(text, cfg)
            candidates = [SentenceCandidate(text=r.text, paragraph_index=r.paragraph_index)
                          for r in reports if r.kept]

        st.success(f"Kept {len(candidates)} of {len(reports)} fragments")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Fragments", len(reports))
        with col2:
            st.metric("Sentences Kept", len(candidates))
        with col3:
            st.metric("Paragraphs", len({r.paragraph_index for r in reports}))

        fragments_df = pd.DataFrame([{
            "Paragraph": r.paragraph_index + 1,
            "Kept": "yes" if r.kept else "no",
            "Reason": REASON_LABELS.get(r.reason, "") if r.reason else "",
            "Length": len(r.text),
            "Text": preview(r.text),
        } for r in reports if r.text])
        st.dataframe(fragments_df, use_container_width=True)

    if len(candidates) <= num_sentences:
        st.info("Not more sentences than requested - returning all of them, scoring skipped")
        return generate_summary(candidates, num_sentences)

    # Step 2: Scoring
    st.header("Step 2: Sentence Scoring")
    with st.expander("Scoring Details", expanded=True):
        st.write("**Running:** Bullet, metric, connective, position, paragraph, pattern, length, redundancy and topical signals")

        with st.spinner("Scoring sentences..."):
            scored = score_sentences(candidates)
            n = len(candidates)
            breakdowns = [explain_score(c, i, n) for i, c in enumerate(candidates)]

        st.success("Calculated sentence scores")

        rows = []
        for s, b in zip(scored, breakdowns):
            row = {"Sentence #": s.sequence_index + 1, "Paragraph": s.paragraph_index + 1}
            row.update({k: round(v, 3) for k, v in b.items()})
            row["Text"] = preview(s.text)
            rows.append(row)
        st.dataframe(pd.DataFrame(rows), use_container_width=True)

        scores = np.array([s.score for s in scored])
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Min Score", f"{scores.min():.3f}")
        with col2:
            st.metric("Max Score", f"{scores.max():.3f}")
        with col3:
            st.metric("Mean Score", f"{scores.mean():.3f}")
        with col4:
            st.metric("Std Score", f"{scores.std():.3f}")

    # Step 3: Selection
    st.header("Step 3: Coherent Selection")
    with st.expander("Selection Details", expanded=True):
        pool_size = min(2 * num_sentences, len(scored))
        st.write(f"**Running:** Seeding with the top sentence, then picking from a pool of {pool_size} by contextual score")

        with st.spinner("Selecting sentences..."):
            steps = selection_trace(scored, num_sentences)

        st.success(f"Selected {len(steps)} sentences")

        steps_df = pd.DataFrame([{
            "Round": i + 1,
            "Sentence #": step.sentence.sequence_index + 1,
            "Paragraph": step.sentence.paragraph_index + 1,
            "Raw Score": f"{step.sentence.score:.3f}",
            "Contextual Score": f"{step.contextual_score:.3f}",
            "Text": preview(step.sentence.text),
        } for i, step in enumerate(steps)])
        st.dataframe(steps_df, use_container_width=True)

        st.subheader("Selection Path")
        if len(scored) <= 60:
            try:
                with st.spinner("Generating selection plot..."):
                    image = draw_selection_path(scored, steps)
                st.image(image, caption="Gold: seed sentence. Blue: coherent picks. Arrows follow pick order.",
                         use_column_width=True)
            except Exception as e:
                st.error(f"Could not generate selection plot: {str(e)}")
        else:
            st.info(f"Too many sentences to plot ({len(scored)}).")

    # Step 4: Summary
    st.header("Step 4: Summary Assembly")
    with st.expander("Summary Assembly Details", expanded=True):
        ordered = sorted((step.sentence for step in steps), key=lambda s: s.sequence_index)
        picked = {s.sequence_index for s in ordered}
        st.dataframe(pd.DataFrame([{
            "Sentence #": s.sequence_index + 1,
            "Score": f"{s.score:.3f}",
            "Selected": "yes" if s.sequence_index in picked else "no",
            "Text": s.text,
        } for s in scored]), use_container_width=True)

    return " ".join(s.text for s in ordered)

def main():
    logging.basicConfig(level=logging.INFO)
    st.title("News Summarizer")
    st.write("Upload a text file to extract its most representative sentences")

    num_sentences, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Upload a text file to summarize (supports .txt, .rtf, .md formats)"
    )

    if uploaded_file is not None:
        text = load_text_from_file(uploaded_file)
        file_extension = uploaded_file.name.lower().split('.')[-1]

        st.subheader(f"Original Text ({file_extension.upper()} format)")
        st.text_area("Content", text, height=200, disabled=True)

        if st.button("Generate Summary", type="primary"):
            try:
                if debug_mode:
                    st.markdown("---")
                    st.title("Pipeline Debug Mode")
                    result = debug_pipeline(text, num_sentences)
                else:
                    with st.spinner("Generating summary..."):
                        result = summarize(text, num_sentences=num_sentences)

                st.markdown("---")
                st.header("Final Summary")
                st.text_area("Generated Summary", result, height=150, disabled=True)

                col1, col2, col3 = st.columns(3)
                with col1:
                    st.metric("Original Length", len(text.split()))
                with col2:
                    st.metric("Summary Length", len(result.split()) if result else 0)
                with col3:
                    compression = len(result.split()) / len(text.split()) if text and result else 0
                    st.metric("Actual Compression", f"{compression:.2%}")

            except Exception as e:
                st.error(f"Error generating summary: {str(e)}")
                st.exception(e)

if __name__ == "__main__":
    main()
