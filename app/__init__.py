"""Taskly API application package.

Layers: ``domain`` (entities and errors), ``application`` (use cases),
``infrastructure`` (JSON storage, security, email, scheduler) and
``interfaces`` (FastAPI routes and schemas).
"""
