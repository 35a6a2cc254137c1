"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; the in-memory model is the only collaborator handlers need.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
