"""
Top‑level package for the Freelance Marketplace API.

This file makes ``freelance_marketplace_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``freelance_marketplace_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
