"""
Memo UI: Streamlit form and list for the Memo API
"""
