"""Modelos de la sharing API.

- `models`: perfiles, notificaciones y resultado de borrado (lo que responde el servidor).
- `context`: contexto del caller, opciones finales y request compuesto (lo que se envía).
"""
