"""
Hayvn-RE agent workspace: Streamlit front-end for the real-estate CRM.
"""

__version__ = "0.1.0"
