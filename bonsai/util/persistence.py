import logging
import os
import pathlib
import re
from typing import Optional

from bonsai.plant.branch import ConfigError


class SaveFileError(ConfigError):
    pass


_FIELD_REGEX = re.compile(r'[0-9]+')


def default_path() -> pathlib.Path:
    cache = os.environ.get('XDG_CACHE_HOME')
    if cache:
        return pathlib.Path(cache) / 'bonsai'
    return pathlib.Path.home() / '.cache' / 'bonsai'


def parse(text: str) -> tuple[int, int]:
    """Parses ``"<seed> <branches>"``. Raises SaveFileError for anything else."""
    fields = text.split()
    if len(fields) != 2:
        raise SaveFileError('expected a seed and a branch count, found {0} values'.format(len(fields)))
    if not all(_FIELD_REGEX.fullmatch(f) for f in fields):
        raise SaveFileError('save file values must be plain non-negative integers: {0!r}'.format(text.strip()))
    seed, branches = (int(f) for f in fields)
    return seed, branches


class SaveFile:
    """Where a tree's seed and progress are kept so it can be grown again later."""

    def __init__(self, path: Optional[pathlib.Path] = None):
        self.path = pathlib.Path(path) if path is not None else default_path()

    def save(self, seed: int, branches: int):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text('{0} {1}'.format(seed, branches), encoding='utf-8')
        logging.debug('Saved seed {0} at {1} branches to {2}'.format(seed, branches, self.path))

    def load(self) -> Optional[tuple[int, int]]:
        try:
            text = self.path.read_text(encoding='utf-8')
        except OSError as error:
            logging.warning('Could not read save file {0} ({1}), starting a new tree.'.format(self.path, error.strerror or error))
            return None
        except UnicodeDecodeError:
            raise SaveFileError('save file {0} is not a text file'.format(self.path)) from None
        return parse(text)
