"""Client for the Zendesk Support REST API, with dataclass payloads."""

__version__ = "0.1.0"