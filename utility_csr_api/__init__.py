"""
Top‑level package for the utility customer‑service API.

A mock multi‑tenant utility backend serving account, billing and meter
data for three fake utilities, used as a test fixture for voice‑agent
integrations.  All functionality lives in submodules under ``app``.
"""

__all__ = []
