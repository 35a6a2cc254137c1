"""WoofAreYou test suite.

Folder taxonomy
- unit/   : Isolated, fast checks of a single module/class/function.
- e2e/    : The command-line interface driven through Click's test runner.
- fixtures/: Shared factory fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; the model is in memory, so prefer the
  real InMemoryModel over mocks.
- e2e asserts user-observable output, not internals.
- Markers: unit, e2e (added automatically per folder).
"""
