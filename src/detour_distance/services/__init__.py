"""
Shared service plumbing.

- http.py    - requests session with retry/backoff and default timeout
- routing.py - RouteDistanceProvider protocol and RouteResult variants
"""
