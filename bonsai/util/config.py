import logging
import pathlib

import toml


class Config:
    """
    Small wrapper around a toml file. Keys are looked up like a dict ::
        config = Config(pathlib.Path('config.toml'))
        debug = config.get('debug', False)
        options = config.section('bonsai')
    A missing file behaves like an empty one so the program runs without setup.
    """

    def __init__(self, path: pathlib.Path):
        self.path = pathlib.Path(path)
        self._data: dict = {}
        self.load_from_file()

    def load_from_file(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                self._data = toml.load(f)
        except FileNotFoundError:
            logging.info('No config found at {0}, using defaults.'.format(self.path))
            self._data = {}

    def save(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            toml.dump(self._data, f)

    def get(self, key, *args):
        return self._data.get(str(key), *args)

    def section(self, name) -> dict:
        value = self._data.get(name, {})
        if not isinstance(value, dict):
            return {}
        return value

    def put(self, key, value):
        self._data[str(key)] = value

    def __contains__(self, item):
        return str(item) in self._data

    def __getitem__(self, item):
        return self._data[str(item)]
