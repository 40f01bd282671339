"""Agenda de Salud — backend de agendamiento de atenciones de salud.

Health-appointment scheduling backend (FastAPI + async SQLAlchemy).
"""
