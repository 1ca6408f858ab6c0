import time
import json
import logging
import asyncio
from typing import Optional
from functools import wraps

from sahayak.core.errors import ValidationError

logger = logging.getLogger("sahayak.telemetry")


def emit_event(event: str, *, route: str, version: str, error_type: Optional[str] = None,
               latency_ms: Optional[int] = None, ok: Optional[bool] = None,
               status: Optional[int] = None):
    payload = {
        "event": event,
        "route": route,
        "version": version,
        "error_type": error_type,
        "latency_ms": latency_ms,
        "ok": ok,
        "status": status,
        "ts": time.time(),
    }
    # log as single-line JSON for easy parsing in prod
    logger.info("telemetry=%s", json.dumps(payload, separators=(",", ":")))


def _status_for(exc: Exception) -> int:
    # Mirrors the exception handlers registered in sahayak.main
    return 400 if isinstance(exc, ValidationError) else 500


def instrument(route: str, version: str):
    def deco(fn):
        if asyncio.iscoroutinefunction(fn):
            @wraps(fn)
            async def wrapped_async(*args, **kwargs):
                t0 = time.time()
                ok = True
                err = None
                status = 200
                try:
                    out = await fn(*args, **kwargs)
                    return out
                except Exception as e:
                    ok = False
                    err = str(e.__class__.__name__)
                    status = _status_for(e)
                    raise
                finally:
                    dt = int((time.time() - t0) * 1000)
                    emit_event("api_call", route=route, version=version, latency_ms=dt, ok=ok,
                               error_type=err, status=status)
            return wrapped_async
        else:
            @wraps(fn)
            def wrapped(*args, **kwargs):
                t0 = time.time()
                ok = True
                err = None
                status = 200
                try:
                    out = fn(*args, **kwargs)
                    return out
                except Exception as e:
                    ok = False
                    err = str(e.__class__.__name__)
                    status = _status_for(e)
                    raise
                finally:
                    dt = int((time.time() - t0) * 1000)
                    emit_event("api_call", route=route, version=version, latency_ms=dt, ok=ok,
                               error_type=err, status=status)
            return wrapped
    return deco
