import json
import logging
import os

logger = logging.getLogger('pokedex.theme')

THEME_KEY = 'theme'
DARK_MODE = 'dark-mode'


class ThemeStore:
    """Persists the dark/light preference as {"theme": "dark-mode"} in a JSON file.

    An absent key (or file) means light.
    """

    def __init__(self, path):
        self.path = path

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.warning('Ignoring unreadable theme file %s: %s', self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self):
        return self._read().get(THEME_KEY) == DARK_MODE

    def save(self, dark):
        data = self._read()
        if dark:
            data[THEME_KEY] = DARK_MODE
        else:
            data.pop(THEME_KEY, None)
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as fh:
            json.dump(data, fh)

    def toggle(self):
        dark = not self.load()
        self.save(dark)
        logger.info('Theme switched to %s', 'dark' if dark else 'light')
        return dark
