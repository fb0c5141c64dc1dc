#!/usr/bin/env python3
"""
Tests for Bluetooth Tray configuration, backend factory, translations
and desktop notifications.
"""

import logging
import os
import sys
import subprocess
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(__file__))
from test_helpers import add_repo_to_path  # noqa: E402

add_repo_to_path()

from bluetooth_tray import config  # noqa: E402
from bluetooth_tray.factory import RealBluetoothBackend, create_backend  # noqa: E402
from bluetooth_tray.mock_backend import MockBluetoothBackend  # noqa: E402
from bluetooth_tray.notify import show_notification  # noqa: E402
from bluetooth_tray.translations import (  # noqa: E402
    TRANSLATIONS, detect_system_language, get_text,
)


class TestConfig(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        self.assertEqual(config.get_mode(), "production")
        self.assertEqual(config.get_btctl_command(), "bluetoothctl")
        self.assertEqual(config.get_notify_command(), "notify-send")
        self.assertIsNone(config.get_timeout())
        self.assertIsNone(config.get_forced_language())
        self.assertEqual(config.get_log_level(), logging.INFO)

    @patch.dict(os.environ, {
        "BT_TRAY_MODE": " Test ",
        "BT_TRAY_BTCTL": "/usr/local/bin/bluetoothctl",
        "BT_TRAY_NOTIFY": "dunstify",
        "BT_TRAY_TIMEOUT": "2.5",
        "BT_TRAY_LANG": "Español",
        "BT_TRAY_LOG_LEVEL": "debug",
    }, clear=True)
    def test_overrides(self):
        self.assertEqual(config.get_mode(), "test")
        self.assertEqual(config.get_btctl_command(), "/usr/local/bin/bluetoothctl")
        self.assertEqual(config.get_notify_command(), "dunstify")
        self.assertEqual(config.get_timeout(), 2.5)
        self.assertEqual(config.get_forced_language(), "Español")
        self.assertEqual(config.get_log_level(), logging.DEBUG)

    def test_invalid_timeout_means_none(self):
        for raw in ("", "abc", "0", "-3"):
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {"BT_TRAY_TIMEOUT": raw}):
                    self.assertIsNone(config.get_timeout())

    @patch.dict(os.environ, {"BT_TRAY_LOG_LEVEL": "chatty"})
    def test_invalid_log_level(self):
        self.assertEqual(config.get_log_level(), logging.INFO)


class TestFactory(unittest.TestCase):

    @patch.dict(os.environ, {"BT_TRAY_MODE": "test"})
    def test_test_mode_uses_mock(self):
        self.assertIsInstance(create_backend(), MockBluetoothBackend)

    @patch.dict(os.environ, {}, clear=True)
    def test_production_mode_uses_bluetoothctl(self):
        self.assertIsInstance(create_backend(), RealBluetoothBackend)

    @patch('bluetooth_tray.backend.list_paired_devices', return_value=[])
    @patch('bluetooth_tray.backend.connect', return_value=False)
    @patch('bluetooth_tray.backend.set_adapter_power', return_value=True)
    @patch('bluetooth_tray.backend.get_adapter_power', return_value=True)
    def test_real_backend_delegates(self, mock_power, mock_set, mock_connect, mock_list):
        real = RealBluetoothBackend()
        self.assertTrue(real.get_adapter_power())
        self.assertTrue(real.set_adapter_power(False))
        self.assertFalse(real.connect("AA:BB:CC:DD:EE:FF"))
        self.assertEqual(real.list_paired_devices(), [])
        mock_set.assert_called_once_with(False)
        mock_connect.assert_called_once_with("AA:BB:CC:DD:EE:FF")
        self.assertTrue(real.get_adapter_status().powered)


class TestTranslations(unittest.TestCase):

    def test_languages_share_keys(self):
        self.assertEqual(set(TRANSLATIONS['English']), set(TRANSLATIONS['Español']))

    def test_get_text_fallbacks(self):
        self.assertEqual(get_text('quit', 'Español'), 'Salir')
        self.assertEqual(get_text('quit', 'Klingon'), 'Quit')
        self.assertEqual(get_text('missing_key', 'Español'), 'missing_key')

    @patch.dict(os.environ, {"LANG": "es_ES.UTF-8"}, clear=True)
    def test_detect_spanish(self):
        self.assertEqual(detect_system_language(), 'Español')

    @patch.dict(os.environ, {"LANG": "fr_FR.UTF-8"}, clear=True)
    def test_detect_unknown_falls_back(self):
        self.assertEqual(detect_system_language(), 'English')

    @patch.dict(os.environ, {"LANG": "en_US.UTF-8", "BT_TRAY_LANG": "Español"}, clear=True)
    def test_forced_language_wins(self):
        self.assertEqual(detect_system_language(), 'Español')


class TestNotification(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    @patch('bluetooth_tray.notify.subprocess.run')
    def test_notify_send_invocation(self, mock_run):
        show_notification("Bluetooth On")
        args, _ = mock_run.call_args
        self.assertEqual(args[0], ["notify-send", "Bluetooth Manager", "Bluetooth On"])

    @patch.dict(os.environ, {}, clear=True)
    @patch('bluetooth_tray.notify.subprocess.run')
    def test_nonzero_exit_logged(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(["notify-send"], 1, b"", b"")
        with self.assertLogs("bluetooth_tray.notify", level="DEBUG") as logs:
            show_notification("Bluetooth On")
        self.assertIn("notify-send exited with 1", logs.output[0])

    @patch('bluetooth_tray.notify.subprocess.run')
    def test_success_not_logged(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(["notify-send"], 0, b"", b"")
        with patch('bluetooth_tray.notify.LOG') as mock_log:
            show_notification("Bluetooth On")
        mock_log.debug.assert_not_called()

    @patch('bluetooth_tray.notify.subprocess.run', side_effect=FileNotFoundError)
    def test_missing_notifier_ignored(self, mock_run):
        show_notification("Bluetooth On")

    @patch('bluetooth_tray.notify.subprocess.run',
           side_effect=subprocess.TimeoutExpired(cmd='notify-send', timeout=1))
    def test_timeout_ignored(self, mock_run):
        show_notification("Bluetooth On")


if __name__ == "__main__":
    unittest.main()
