"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos (httpx).
- Permite invertir dependencias: los handlers dependen del contrato, no del cliente HTTP.
"""
