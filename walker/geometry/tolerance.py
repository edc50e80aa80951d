from __future__ import annotations

# Shared geometric tolerance: vector equality and segment/plane parallel checks.
EPS_GEO = 1e-4

# Positional epsilon for near-zero distance/length checks.
EPS_POS = 1e-12
