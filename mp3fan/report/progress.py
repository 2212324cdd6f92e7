import itertools
import sys
import time


class ProgressRenderer:
    """
    Byte-offset progress bar for long frame walks, drawn on stderr
    """
    def __init__(self, enabled: bool = False, stream=None, bar_length: int = 30, interval: float = 0.05):
        self.stream = stream if stream is not None else sys.stderr
        self.enabled = enabled and self.stream.isatty()
        self.bar_length = bar_length
        self.interval = interval
        self.spinner = itertools.cycle('|/-\\')
        self.last_time = 0.0
        self.active = False

    def __call__(self, current: int, total: int) -> None:
        self.render(current, total)

    def render(self, current: int, total: int, force: bool = False) -> None:
        if not self.enabled or total <= 0:
            return
        now = time.time()
        if not self.active:
            self.active = True
            self.last_time = 0.0
        if not force and current < total and (now - self.last_time) < self.interval:
            return
        percent = current / total
        filled = min(self.bar_length, int(self.bar_length * percent))
        bar = '█' * filled + '░' * (self.bar_length - filled)
        self.stream.write(f"\r[{bar}] {percent*100:6.2f}% {next(self.spinner)}")
        self.stream.flush()
        self.last_time = now
        if current >= total:
            self.finish()

    def finish(self) -> None:
        if self.active:
            self.stream.write('\n')
            self.stream.flush()
            self.active = False
