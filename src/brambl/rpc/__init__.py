"""
Loki-layer JSON-RPC plumbing: envelope dispatch over httpx, the static
operation catalog and parameter validation.
"""
