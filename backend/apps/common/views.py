import time

from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .db import SQL_BACKEND, store_backend
from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _db_check(alias='default'):
    started = time.time()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': 'operational_error'}
    except Exception as e:  # readiness must answer even on driver bugs
        logger.error('Database health check failed unexpectedly', alias=alias, exception=e.__class__.__name__)
        return {'status': 'fail', 'error': 'unexpected_error', 'exception': e.__class__.__name__}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: the configured store must answer."""
    backend = store_backend()
    checks = {}
    if backend == SQL_BACKEND:
        checks['database'] = _db_check()
    else:
        checks['database'] = {'status': 'skipped', 'detail': 'in-memory store'}

    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'store_backend': backend,
        'checks': checks,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)
