"""Core del cliente.

Por qué:
- Lógica pura: resolución de portal/identidad y composición de requests.
- No conoce httpx; el I/O vive en `portal_users.adapters`.
"""
