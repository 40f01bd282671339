"""Paquete de servicios — capa de lógica de negocio.

Service package — Business logic layer.
Services call repositories for DB operations and raise HTTP-mapped errors.
"""
