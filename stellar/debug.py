from typing import Optional, TextIO


class DebugLog:
    """Verbosity-gated trace output.

    Nothing is opened or written while ``level`` is zero. Above zero,
    messages at or below the level are appended to ``path``; once the
    file has been closed they go to stdout instead.
    """
    def __init__(self, level: int = 0, path: str = 'debug.txt'):
        self.level = level
        self.path = path
        self.fp: Optional[TextIO] = open(path, 'w', encoding='utf-8') if level > 0 else None

    def enabled(self, level: int = 1) -> bool:
        return 0 < level <= self.level

    def __call__(self, msg: str, level: int = 1):
        if not self.enabled(level):
            return
        if self.fp:
            self.fp.write(msg + '\n')
            self.fp.flush()
        else:
            print(msg)

    def close(self):
        if self.fp:
            self.fp.close()
            self.fp = None
