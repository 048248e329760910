import os
import threading
import unittest
from unittest import mock

from skdrive import config


class TestConfig(unittest.TestCase):

    def setUp(self):
        config.reset()

    def tearDown(self):
        config.reset()

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(config.get_validity_check_enabled())
            self.assertEqual(config.get_rotation_tolerance(), 1e-9)

    def test_env_disable_validity_check(self):
        for value in ('1', 'true', 'YES'):
            config.reset()
            with mock.patch.dict(
                    os.environ, {'SKDRIVE_DISABLE_VALIDITY_CHECK': value}):
                self.assertFalse(config.get_validity_check_enabled())

        config.reset()
        with mock.patch.dict(
                os.environ, {'SKDRIVE_DISABLE_VALIDITY_CHECK': '0'}):
            self.assertTrue(config.get_validity_check_enabled())

    def test_env_rotation_tolerance(self):
        with mock.patch.dict(
                os.environ, {'SKDRIVE_ROTATION_TOLERANCE': '1e-6'}):
            self.assertEqual(config.get_rotation_tolerance(), 1e-6)

        config.reset()
        with mock.patch.dict(
                os.environ, {'SKDRIVE_ROTATION_TOLERANCE': '-1'}):
            with self.assertRaises(ValueError):
                config.get_rotation_tolerance()

    def test_set_validity_check_enabled(self):
        config.set_validity_check_enabled(False)
        self.assertFalse(config.get_validity_check_enabled())
        config.set_validity_check_enabled(True)
        self.assertTrue(config.get_validity_check_enabled())

    def test_validity_check_context(self):
        config.set_validity_check_enabled(True)
        with config.validity_check(False):
            self.assertFalse(config.get_validity_check_enabled())
            with config.validity_check(True):
                self.assertTrue(config.get_validity_check_enabled())
            self.assertFalse(config.get_validity_check_enabled())
        self.assertTrue(config.get_validity_check_enabled())

    def test_validity_check_context_restored_on_error(self):
        with self.assertRaises(RuntimeError):
            with config.validity_check(False):
                raise RuntimeError
        self.assertTrue(config.get_validity_check_enabled())

    def test_set_rotation_tolerance(self):
        config.set_rotation_tolerance(0.01)
        self.assertEqual(config.get_rotation_tolerance(), 0.01)
        with self.assertRaises(ValueError):
            config.set_rotation_tolerance(0.0)

    def test_thread_local(self):
        config.set_validity_check_enabled(False)
        results = []

        def worker():
            results.append(config.get_validity_check_enabled())
            config.set_rotation_tolerance(0.5)

        with mock.patch.dict(os.environ, {}, clear=True):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

            self.assertEqual(results, [True])
            self.assertFalse(config.get_validity_check_enabled())
            self.assertEqual(config.get_rotation_tolerance(), 1e-9)
