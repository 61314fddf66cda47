"""GreenCaddie course geometry, QA and live-play distance core."""

__version__ = "0.1.0"
