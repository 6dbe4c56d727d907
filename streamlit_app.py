# streamlit_app.py

import streamlit as st

from smart_reply_agent.config import load_config
from smart_reply_agent.logging_setup import setup_logging
from smart_reply_agent.models import Category
from smart_reply_agent.pipeline import process_email
from smart_reply_agent.templates import TEMPLATES

config = load_config()
setup_logging(config.log_level)

# ---------------------------
# Global styles
# ---------------------------
st.set_page_config(
    page_title="ReplyIntel",
    page_icon="✉️",
    layout="wide",
)

st.markdown(
    """
    <style>
    .stApp {
        background: linear-gradient(135deg, #eff6ff 0%, #e0e7ff 100%);
        font-family: "Segoe UI", system-ui, -apple-system, BlinkMacSystemFont, sans-serif;
    }

    .template-card {
        border-radius: 10px;
        padding: 12px 14px;
        margin-bottom: 8px;
        background: #ffffff;
        border: 1px solid #e5e7eb;
        min-height: 96px;
    }

    .template-card.selected {
        border: 1px solid #6366f1;
        background: #eef2ff;
    }

    .template-title {
        font-weight: 600;
        color: #4f46e5;
        margin-bottom: 4px;
    }

    .template-description {
        font-size: 0.85rem;
        color: #4b5563;
    }

    .app-title {
        font-size: 2.2rem;
        font-weight: 800;
        color: #1f2937;
        text-align: center;
    }

    .app-subtitle {
        font-size: 0.95rem;
        color: #4b5563;
        text-align: center;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------------------------
# Session state
# ---------------------------
if "email_text" not in st.session_state:
    st.session_state.email_text = ""
if "reply" not in st.session_state:
    st.session_state.reply = None
if "selected_category" not in st.session_state:
    st.session_state.selected_category = None


# ---------------------------
# Helper functions
# ---------------------------

def category_badge(category: Category) -> str:
    colors = {
        Category.INQUIRY: "#3b82f6",
        Category.MEETING_REQUEST: "#a855f7",
        Category.FOLLOW_UP: "#0ea5e9",
        Category.THANK_YOU: "#22c55e",
        Category.COMPLAINT: "#ef4444",
        Category.SUPPORT_REQUEST: "#eab308",
        Category.INTRODUCTION: "#14b8a6",
        Category.FEEDBACK: "#ec4899",
    }
    color = colors.get(category, "#6b7280")

    return f"""
    <span style="
        background-color:{color};
        color:#ffffff;
        padding:3px 10px;
        border-radius:999px;
        font-size:0.8rem;
        font-weight:600;
        ">
        {category}
    </span>
    """


def generate_reply() -> None:
    text = st.session_state.email_text
    if not text.strip():
        return
    try:
        st.session_state.reply = process_email(
            text,
            category=st.session_state.selected_category,
            config=config,
        )
    except Exception as ex:
        st.session_state.reply = None
        st.error(f"Error while generating reply: {ex}")


def clear_all() -> None:
    st.session_state.email_text = ""
    st.session_state.reply = None
    st.session_state.selected_category = None


def select_template(category) -> None:
    st.session_state.selected_category = category
    generate_reply()


# ---------------------------
# Header
# ---------------------------

st.markdown('<div class="app-title">✉️ ReplyIntel</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="app-subtitle">Generate fitting replies to emails from content analysis and predefined templates.</div>',
    unsafe_allow_html=True,
)
st.write("")

# ---------------------------
# Input / output
# ---------------------------

col_in, col_out = st.columns(2)

with col_in:
    st.subheader("📨 Input Email")
    st.text_area(
        "Email you received",
        key="email_text",
        height=280,
        placeholder="Paste the email you received here...",
        label_visibility="collapsed",
    )

    btn_clear, btn_generate = st.columns(2)
    with btn_clear:
        st.button("Clear", key="clear", on_click=clear_all, use_container_width=True)
    with btn_generate:
        st.button(
            "🚀 Generate Reply",
            key="generate",
            on_click=generate_reply,
            disabled=not st.session_state.email_text.strip(),
            type="primary",
            use_container_width=True,
        )

with col_out:
    st.subheader("📤 Generated Reply")
    result = st.session_state.reply

    if result is None:
        st.info("Your generated reply will appear here...")
    else:
        source = "selected template" if result.category_forced else "auto-detected"
        st.markdown(
            f"{category_badge(result.category)} <span style='color:#6b7280;font-size:0.8rem;'>{source}</span>",
            unsafe_allow_html=True,
        )
        # st.code carries the copy-to-clipboard button
        st.code(result.reply, language="text")

# ---------------------------
# Templates
# ---------------------------

st.write("---")
st.subheader("🗂 Available Templates")
st.caption(
    "Pick a template to use it for your reply. "
    "The selected template is used instead of auto-detecting the email type."
)

st.button(
    "🔍 Auto-detect",
    key="auto_detect",
    on_click=select_template,
    args=(None,),
    disabled=st.session_state.selected_category is None,
)

grid = st.columns(3)
for i, (category, template) in enumerate(TEMPLATES):
    with grid[i % 3]:
        selected = st.session_state.selected_category == category
        st.markdown(
            f"""
            <div class="template-card{' selected' if selected else ''}">
                <div class="template-title">{category}</div>
                <div class="template-description">{template.description}</div>
            </div>
            """,
            unsafe_allow_html=True,
        )
        st.button(
            "✓ Selected" if selected else "Use this template",
            key=f"use_{category.name}",
            on_click=select_template,
            args=(category,),
            disabled=selected,
            use_container_width=True,
        )
