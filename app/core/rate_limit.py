"""
Límite de intentos de login en memoria, por IP y ventana deslizante.

Uso: allow(ip, limit=settings.login_rate_per_min) en `POST /login`.
Las IPs sin intentos dentro de la ventana se eliminan del bucket, así que
su tamaño queda acotado por los clientes activos en el último minuto.
"""
from time import time
from typing import Dict, List

WINDOW_SECONDS = 60

BUCKET: Dict[str, List[float]] = {}


def _sweep(now: float, window_seconds: int) -> None:
    """Elimina las IPs cuyo último intento ya salió de la ventana."""
    stale = [ip for ip, hits in BUCKET.items() if not hits or now - hits[-1] >= window_seconds]
    for ip in stale:
        del BUCKET[ip]


def allow(ip: str, limit: int, window_seconds: int = WINDOW_SECONDS) -> bool:
    """True si la IP aún tiene intentos en la ventana; registra el intento."""
    now = time()
    _sweep(now, window_seconds)
    hits = [t for t in BUCKET.get(ip, ()) if now - t < window_seconds]
    if len(hits) >= limit:
        BUCKET[ip] = hits
        return False
    hits.append(now)
    BUCKET[ip] = hits
    return True


def reset() -> None:
    """Limpia el bucket (útil en tests o reinicios)."""
    BUCKET.clear()
