"""
Integration tests package.

Tests de integración que verifican el funcionamiento correcto de:
- Reintento ante deadlocks / "database is locked"
- Global Exception Handler (500 con error_id)
- Health Checks
- Repositorios SQL contra SQLite real
- Reservaciones concurrentes sobre el mismo auto

Para ejecutar solo tests de integración:
    pytest tests/integration/
"""
