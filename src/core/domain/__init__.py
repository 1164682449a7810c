"""Modelos, rutas y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni la CLI: solo conceptos de la API.
"""
