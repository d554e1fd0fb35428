"""Driver for Winsen ZH06 and ZH07 laser dust sensors in initiative upload and Q&A modes."""

__version__ = "0.1.0"