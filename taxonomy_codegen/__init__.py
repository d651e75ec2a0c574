"""
Taxonomy Option-List Code Generator
===================================
Build-time generator: GraphQL taxonomy → two read-only option-list modules.

Layer map
─────────────────────────────────────────────────────
  config/       Environment-driven settings
  domain/       Pure business objects (models, exceptions) — no I/O
  ports/        Abstract interfaces (Python Protocols)
  adapters/     Concrete implementations of each Port (GraphQL, filesystem)
  services/     Partitioning, rendering and the pipeline; Ports only
  interfaces/   Delivery layer: CLI
  tests/        Full test suite: unit / integration / e2e

Swapping the taxonomy source or the output sink:
  1. Write a new adapter in adapters/ implementing the relevant Port
  2. Change the single wiring line in services/container.py
"""
__version__ = "1.0.0"
