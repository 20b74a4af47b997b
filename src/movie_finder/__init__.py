"""Movie Finder.

Search the OMDb movie database and keep a list of favorite movies,
served over a small HTTP API with a Streamlit frontend.
"""

__version__ = "0.1.0"
