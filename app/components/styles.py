from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Student Records"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🎓",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --accent: __ACCENT__;
  --accent-hover: __ACCENT_HOVER__;
  --skeleton: __SKELETON__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;
  --border-muted: __BORDER_MUTED__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  color: var(--text-primary) !important;
}
[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--border-muted) !important;
}

.block-container{
  padding-top: 1rem !important;
  padding-bottom: 2rem !important;
  max-width: 80rem;
}

/* Header */
.rec-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.rec-title{
  font-size: 20px;
  font-weight: 600;
  line-height: 1.1;
}
.rec-subtitle{
  font-size: 14px;
  color: var(--text-secondary);
}
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: __SUCCESS__;
  display:inline-block;
}

/* Table */
.rec-th{
  font-weight: 600;
  text-align: center;
  padding: 8px 0;
  border-bottom: 1px solid var(--card-border);
}
.skeleton-row{
  display:grid;
  grid-template-columns: 0.6fr 1.6fr 2.2fr 1.4fr 3.2fr 0.5fr 0.5fr;
  gap: 16px;
  padding: 12px 0;
}
.skeleton-cell, .skeleton-bar{
  height: 16px;
  border-radius: 4px;
  background: var(--skeleton);
  animation: pulse 1.5s ease-in-out infinite;
}

/* Forms */
.form-skeleton{
  display:flex;
  flex-direction:column;
  gap: 16px;
  max-width: 28rem;
  margin: 2rem auto;
}
.skeleton-bar{ height: 24px; }
.skeleton-bar.tall{ height: 96px; }
.field-error{
  color: __DANGER__;
  font-size: 13px;
  margin: -6px 0 8px 0;
}
div[data-testid="stForm"], .rec-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
}

/* Buttons */
div.stButton > button{
  border-radius: var(--radius) !important;
  border: 1px solid var(--card-border) !important;
  background: var(--accent) !important;
  color: var(--text-primary) !important;
}
div.stButton > button:hover{
  background: var(--accent-hover) !important;
}
div.stButton > button:disabled{
  opacity: 0.5;
}

@keyframes pulse{
  0%, 100% { opacity: 1; }
  50% { opacity: .5; }
}
</style>
"""

    tokens = {
        "__ACCENT__": str(THEME["accent_primary"]),
        "__ACCENT_HOVER__": str(THEME["accent_secondary"]),
        "__SKELETON__": str(THEME["skeleton"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__BORDER_MUTED__": str(THEME["border_muted"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
        "__SUCCESS__": str(THEME["success"]),
        "__DANGER__": str(THEME["danger"]),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
