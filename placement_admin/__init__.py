"""
Core package for the placement admin dashboard.

Submodules provide the in-memory record collections, seed data, the login
check and notification queue, plus the Streamlit user interface rendered by
the top-level `app.py`.
"""
