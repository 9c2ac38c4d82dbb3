"""Pretalab API Package — tasks, transactions and text generation over REST.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
