"""Logging helpers for the ledger core."""
