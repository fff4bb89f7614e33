"""LLM integration layer.

Kept small on purpose:
- No prompt/output logging (customer messages stay out of logs).
- Configurable via settings / environment variables.
- Stateless per call; shared transport and credential are injected.
"""
