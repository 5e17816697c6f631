"""Contratos (Protocol) que implementan los adaptadores.

Por qué:
- Los servicios dependen del contrato del parser, no de dateutil.
"""
