"""Paquete de repositorios — capa de consultas a la base de datos.

Repository package — Database query layer.
Each repository extends BaseRepository for generic CRUD and adds domain-specific queries.
"""
