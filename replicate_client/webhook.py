from enum import Enum


class WebhookEvent(str, Enum):
    """
    Prediction and training events a webhook can subscribe to.
      - Start: the run started
      - Output: the run produced output
      - Logs: the run emitted log lines
      - Completed: the run reached a terminal status
    """

    START = "start"
    OUTPUT = "output"
    LOGS = "logs"
    COMPLETED = "completed"

    def __contains__(self, item):
        try:
            self(item)
        except ValueError:
            return False
        return True

    @staticmethod
    def options():
        return list(map(lambda c: c.value, WebhookEvent))


def serialize_events_filter(events_filter):
    """Sends events as their string values, ``None`` stays unset."""
    if events_filter is None:
        return None
    return [
        event.value if isinstance(event, WebhookEvent) else str(event)
        for event in events_filter
    ]
