# Copyright (C) 2023 simple_std contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Helper functions and stand-in generators for simple_std tests
"""

import io


class FixedGenerator:
    """Always draws the same offset into the requested range."""

    def __init__(self, value):
        self.value = value

    def below(self, limit):
        assert(self.value < limit), "FixedGenerator value outside of range"
        return self.value

    def bits32(self):
        return self.value


class ScriptedGenerator:
    """Replays a list of 32-bit words, for the multi-word draw paths."""

    def __init__(self, words):
        self.words = list(words)
        self.used = 0

    def below(self, limit):
        raise AssertionError("bounded draw not expected for this range")

    def bits32(self):
        word = self.words[self.used]
        self.used += 1
        return word


class RecordingStdout(io.StringIO):
    """stdout replacement that remembers what was visible at the last flush()."""

    def __init__(self):
        super().__init__()
        self.flushed = None

    def flush(self):
        super().flush()
        self.flushed = self.getvalue()


class WatchingStdin(io.StringIO):
    """stdin replacement that records stdout's flushed text when read."""

    def __init__(self, data, stdout):
        super().__init__(data)
        self.stdout = stdout
        self.seen = None

    def readline(self, *args):
        self.seen = self.stdout.flushed
        return super().readline(*args)


class BrokenStdin:

    def readline(self):
        raise OSError(5, "Input/output error")


def get_bitmap(draw, low, high, samples):
    bitmap = [0 for _ in range(high - low)]
    for _ in range(samples):
        bitmap[draw(low, high) - low] += 1
    return bitmap
