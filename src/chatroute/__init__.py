"""chatroute - per-turn model and reasoning-effort routing for chat backends.

Modules:
    - routing: Deterministic family/effort/model-id resolution
    - usage: Per-request cost estimation and plan limit evaluation
    - config: YAML + environment settings
    - cli: Command-line inspection of routing decisions
    - web: FastAPI routes exposing the resolver and cost helpers
"""

__version__ = "0.3.0"
