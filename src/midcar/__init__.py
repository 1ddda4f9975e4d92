"""midcar - validation and formatting toolkit for the MidCar dealership."""

__version__ = "0.1.0"
