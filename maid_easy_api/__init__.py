"""
Top‑level package for the MaidEasy API.

This file makes ``maid_easy_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``maid_easy_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
