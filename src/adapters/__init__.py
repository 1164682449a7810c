"""Adaptadores: HTTP, construcción de requests, decodificación y operaciones de API."""
