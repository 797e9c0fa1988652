"""
Minimal callback registry used to expose model state to hosts.
"""


class Observable:
    """Per-topic list of ``callback(old, new)`` observers."""

    def __init__(self, topics):
        self._observers = {topic: [] for topic in topics}

    @property
    def topics(self):
        return tuple(self._observers)

    def subscribe(self, topic, callback):
        """Register a callback and return a function that removes it."""
        if topic not in self._observers:
            raise ValueError(f"Unknown topic '{topic}', expected one of {', '.join(self._observers)}")
        self._observers[topic].append(callback)

        def unsubscribe():
            if callback in self._observers[topic]:
                self._observers[topic].remove(callback)

        return unsubscribe

    def notify(self, topic, old, new):
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._observers[topic]):
            callback(old, new)
