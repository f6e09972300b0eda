"""
Pytest configuration and shared test helpers.
"""

import os
import random

# Set up test environment variables before importing any modules
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ["MX_LOOKUP_DELAY"] = "0"
os.environ["CATCH_ALL_DELAY"] = "0"
os.environ["MAILBOX_DELAY"] = "0"
os.environ["RANDOM_SEED"] = "1234"


class ScriptedRandom(random.Random):
    """
    Random source that replays fixed values for random() and
    picks a fixed index for choice().
    """

    def __init__(self, values=(), choice_index=0):
        super().__init__(0)
        self.values = list(values)
        self.choice_index = choice_index
        self.draws = 0

    def random(self):
        self.draws += 1
        if not self.values:
            raise AssertionError("unexpected random() draw")
        return self.values.pop(0)

    def choice(self, seq):
        return seq[self.choice_index]
