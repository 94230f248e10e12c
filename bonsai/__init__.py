from bonsai.util.config import Config

# Filled in by start.py before anything reads it.
config: Config = None
