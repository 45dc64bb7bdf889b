"""
API server package — HTTP interface.

Exposes wallet analytics to the dashboard frontend. Read-only; every
request fetches from upstream and recomputes.
"""
