"""Marcas de tiempo en ISO-8601 UTC usadas en todas las colecciones."""
from datetime import datetime, timezone


def now_iso() -> str:
    """Hora actual en UTC con milisegundos, p. ej. `2024-05-01T10:20:30.123Z`."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
