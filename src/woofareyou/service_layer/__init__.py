"""Service layer for WoofAreYou.

Implements application use-cases: commands, their handlers, the message bus
that dispatches them, and the billing computation. Handlers receive the model
explicitly; they never read ambient state.

Dependency rule: may import `woofareyou.domain` and `woofareyou.interfaces`,
but not `woofareyou.adapters` or `woofareyou.entrypoints`.
"""
