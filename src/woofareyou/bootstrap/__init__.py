"""Bootstrap (composition root) for WoofAreYou.

Assembles the application at runtime: builds the model, injects it into the
service-layer handlers and composes the message bus the entry points talk to.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `woofareyou.adapters`, `woofareyou.service_layer`,
  `woofareyou.interfaces`, `woofareyou.domain`, and `woofareyou.config`.
- Inner layers must not import `woofareyou.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
