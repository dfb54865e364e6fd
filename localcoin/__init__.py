"""
Core package for the Localcoin dashboard application.

Submodules provide configuration, market data fetching, ATM sample data,
filtering, and user interface rendering helpers that are orchestrated by the
top-level `app.py`.
"""
