"""Adaptadores de I/O (httpx) y credenciales concretas."""
