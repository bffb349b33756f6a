"""Contratos que el Core espera de sus colaboradores.

- `auth.AuthenticationProvider`: sesión con `username`, `portal` y `get_token`.
- `transport.Transport`: una llamada HTTP async que devuelve el JSON ya parseado.
"""
