import time

from bonsai.util.human import *


class Clock:
    """Wall clock used for pacing live growth. Swapped out in tests."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, duration: float):
        if duration > 0:
            time.sleep(duration)


def seed_from_time() -> int:
    return int(time.time())


def seconds_to_human(seconds: float):
    total_seconds = int(seconds)
    total_minutes = total_seconds // 60
    total_hours = total_minutes // 60
    seconds = total_seconds % 60
    minutes = total_minutes % 60
    hours = total_hours
    text = []
    if hours != 0:
        text.append(f'{hours} {plural(hours, "hour")}')
    if minutes != 0:
        text.append(f'{minutes} {plural(minutes, "minute")}')
    if seconds != 0:
        text.append(f'{seconds} {plural(seconds, "second")}')
    if len(text) == 0:
        return 'under a second'
    return combine_list_and(text)
