"""Conference session scheduling and favoriting for Django projects."""

__version__ = "0.1.0"
