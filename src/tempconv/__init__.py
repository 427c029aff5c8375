"""tempconv: convert a temperature between Celsius and Fahrenheit."""

__version__ = "0.1.0"
