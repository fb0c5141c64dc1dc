"""Bluetooth Tray - Internationalization translations.

Provides translations for English and Spanish.
"""

TRANSLATIONS = {
    'English': {
        'status_on': 'Bluetooth: On',
        'status_off': 'Bluetooth: Off',
        'on': 'On',
        'off': 'Off',
        'toggle': 'Toggle Bluetooth',
        'disabled': '(Bluetooth disabled)',
        'no_devices': 'No devices',
        'devices_header': '=== DEVICES ===',
        'restart': 'Restart App',
        'quit': 'Quit',
        'restarting': 'Restarting application...',
        'power_changed': 'Bluetooth {state}',
        'power_failed': 'Could not change the Bluetooth state',
        'device_connected': 'Device {address} connected',
        'device_disconnected': 'Device {address} disconnected',
        'connect_failed': 'Could not connect device',
        'disconnect_failed': 'Could not disconnect device',
    },

    'Español': {
        'status_on': 'Bluetooth: Encendido',
        'status_off': 'Bluetooth: Apagado',
        'on': 'Encendido',
        'off': 'Apagado',
        'toggle': 'Alternar Bluetooth',
        'disabled': '(Bluetooth deshabilitado)',
        'no_devices': 'No hay dispositivos',
        'devices_header': '=== DISPOSITIVOS ===',
        'restart': 'Reiniciar App',
        'quit': 'Salir',
        'restarting': 'Reiniciando aplicación...',
        'power_changed': 'Bluetooth {state}',
        'power_failed': 'Error al cambiar estado del Bluetooth',
        'device_connected': 'Dispositivo {address} conectado',
        'device_disconnected': 'Dispositivo {address} desconectado',
        'connect_failed': 'Error al conectar dispositivo',
        'disconnect_failed': 'Error al desconectar dispositivo',
    },
}


def detect_system_language():
    """Detect the UI language from the environment.

    BT_TRAY_LANG wins when it names a known language; otherwise the
    usual locale variables are consulted.

    Returns:
        The language name matching available translations, or 'English'.
    """
    import os
    import locale

    from .config import get_forced_language

    forced = get_forced_language()
    if forced in TRANSLATIONS:
        return forced

    lang_code = None
    for var in ['LC_ALL', 'LC_MESSAGES', 'LANG', 'LANGUAGE']:
        lang_code = os.environ.get(var)
        if lang_code:
            break

    if not lang_code:
        try:
            lang_tuple = locale.getlocale()
            if lang_tuple and lang_tuple[0]:
                lang_code = lang_tuple[0]
        except ValueError:
            pass

    if not lang_code:
        return 'English'

    lang_prefix = lang_code.split('_')[0].split('.')[0].lower()

    lang_map = {
        'en': 'English',
        'es': 'Español',
    }

    return lang_map.get(lang_prefix, 'English')


def get_text(key, language='English'):
    """Retrieve a translated string for the given key and language.

    Args:
        key: The translation key to look up.
        language: The language name (default: 'English').

    Returns:
        The translated string, or the English fallback, or the key itself.
    """
    lang_dict = TRANSLATIONS.get(language, TRANSLATIONS['English'])
    return lang_dict.get(key, TRANSLATIONS['English'].get(key, key))
