"""
harmonica-sync: sincroniza sesiones de Harmonica a archivos markdown.
"""

__version__ = "0.1.0"
