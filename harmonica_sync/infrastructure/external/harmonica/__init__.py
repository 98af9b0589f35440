"""
Cliente de la API REST v1 de Harmonica (solo lectura).

Cubre únicamente lo que necesita el sync:
- listado/búsqueda de sesiones
- detalle de sesión
- respuestas de participantes
- resumen generado
"""
