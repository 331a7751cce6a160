"""Modelos del dominio: inputs validados y outputs normalizados.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs de agentes: solo el contrato de cada operación.
"""
