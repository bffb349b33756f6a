"""Servicios del Core: resolvers y operaciones públicas sobre usuarios."""
