import streamlit as st

# === COLOR PALETTE (navy workspace) ===
NAVY_DEEP        = "#020617"
NAVY             = "#050B13"
NAVY_LIGHT       = "#0A1A2F"
ACCENT_COLOR     = "#34D399"
DANGER_COLOR     = "#DC2626"
TEXT_COLOR       = "#F1F5F9"
SUBTLE_TEXT      = "#94A3B8"
BORDER_COLOR     = "rgba(255,255,255,0.10)"
CARD_BG          = "rgba(15,23,42,0.70)"

# Below this width the header collapses into the hamburger drawer
MOBILE_BREAKPOINT_PX = 768


def apply_css():
    """Full-page navy gradient and card styling shared by every page."""
    st.markdown(f"""
        <style>
        .stApp {{
            background: linear-gradient(180deg, {NAVY_DEEP} 0%, {NAVY} 50%, {NAVY_LIGHT} 100%);
            color: {TEXT_COLOR};
        }}
        .block-container {{ max-width: 72rem; padding-top: 1.5rem; }}
        .hayvn-pill {{
            display: inline-flex; align-items: center; gap: .5rem;
            border: 1px solid {BORDER_COLOR}; background: rgba(255,255,255,0.05);
            border-radius: 999px; padding: .25rem .75rem;
            font-size: 11px; font-weight: 500; color: #CBD5E1;
        }}
        .hayvn-pill .dot {{
            height: 6px; width: 6px; border-radius: 999px; background: {ACCENT_COLOR};
        }}
        .hayvn-card {{
            background: {CARD_BG}; border: 1px solid {BORDER_COLOR};
            border-radius: 16px; padding: 1.5rem; margin: .75rem 0;
        }}
        .hayvn-card h1 {{ color: white; font-weight: 600; letter-spacing: -0.01em; }}
        .hayvn-card p {{ color: #CBD5E1; }}
        </style>
    """, unsafe_allow_html=True)


def status_pill(label: str):
    st.markdown(
        f"<div class='hayvn-pill'><span class='dot'></span>{label}</div>",
        unsafe_allow_html=True,
    )


def hero_card(title: str, body: str):
    st.markdown(
        f"<div class='hayvn-card'><h1>{title}</h1><p>{body}</p></div>",
        unsafe_allow_html=True,
    )
