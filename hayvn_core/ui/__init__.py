# =============================================================================
# hayvn_core/ui/__init__.py
# Streamlit page shell, theme, router and top navigation
# =============================================================================
