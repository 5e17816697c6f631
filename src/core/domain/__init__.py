"""Tipos y constantes del dominio de fechas.

Por qué:
- Aquí viven meses, unidades, errores y la configuración de formato.
- El dominio no conoce dateutil, CLI ni settings: solo conceptos del problema.
"""
