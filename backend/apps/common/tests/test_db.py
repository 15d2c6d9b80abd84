import unittest

from django.core.exceptions import ImproperlyConfigured
from django.db import OperationalError
from django.test import TestCase, override_settings

from apps.common.db import bounded_statement, is_timeout_error, store_backend
from apps.common.repository import StoreTimeoutError


class StoreBackendTests(unittest.TestCase):
    @override_settings(STORE_BACKEND=' Memory ')
    def test_normalizes_value(self):
        self.assertEqual(store_backend(), 'memory')

    @override_settings(STORE_BACKEND='redis')
    def test_rejects_unknown_backend(self):
        with self.assertRaises(ImproperlyConfigured):
            store_backend()


class TimeoutDetectionTests(unittest.TestCase):
    def test_sqlite_lock_is_timeout(self):
        self.assertTrue(is_timeout_error(OperationalError('database is locked')))

    def test_postgres_query_canceled_is_timeout(self):
        exc = OperationalError('canceling statement due to statement timeout')
        cause = Exception('statement timeout')
        cause.pgcode = '57014'
        exc.__cause__ = cause
        self.assertTrue(is_timeout_error(exc))

    def test_other_operational_errors_are_not_timeouts(self):
        self.assertFalse(is_timeout_error(OperationalError('no such table: x')))


class BoundedStatementTests(TestCase):
    def test_yields_connection_and_runs_query(self):
        with bounded_statement() as connection:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
                self.assertEqual(cursor.fetchone()[0], 1)

    def test_lock_timeout_becomes_store_timeout(self):
        with self.assertRaises(StoreTimeoutError) as ctx:
            with bounded_statement(timeout=0.5):
                raise OperationalError('database is locked')
        self.assertIsInstance(ctx.exception.__cause__, OperationalError)

    def test_other_operational_errors_propagate(self):
        with self.assertRaises(OperationalError):
            with bounded_statement():
                raise OperationalError('no such table: widgets')
