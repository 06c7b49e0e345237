"""
Property-based tests for the MCS-96 decoder.

Hypothesis strategies live in `strategies`; the fast lane runs on every
pytest invocation and the nightly lane is opt-in.
"""
