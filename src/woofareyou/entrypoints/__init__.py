"""Entrypoints (inbound adapters) for WoofAreYou.

Expose the application to the outside world: the command-line interface and
its interactive shell. Parse and validate inputs, hand commands to the message
bus, and present results.

Dependency rule: may import `woofareyou.service_layer` and
`woofareyou.bootstrap`; avoid importing `woofareyou.adapters` directly.
"""
