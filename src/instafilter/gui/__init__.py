"""PySide6 front end for Instafilter."""
