"""Streamlit front end for the swim practice log."""
