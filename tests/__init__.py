# ECIES Test Suite
"""
Test suite including:
- Unit tests (keys, derivation, symmetric backends, configuration)
- Integration tests (hybrid encryption end to end)
- Security tests (tampering, malformed input, key boundaries)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
