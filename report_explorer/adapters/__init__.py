"""Adapters exposing the report explorer (CLI, Streamlit)."""
