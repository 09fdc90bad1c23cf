"""Arithmetic Calculator: expression engine, settings and PySide6 front end."""
