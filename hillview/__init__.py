"""A text-based murder-mystery adventure set in a storm-bound student hostel, with a hint command."""

__version__ = "0.1.0"