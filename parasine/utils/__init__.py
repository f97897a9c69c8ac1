from .params import frequency_from_period, identity

__all__ = ["frequency_from_period", "identity"]
