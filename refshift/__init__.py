"""refshift - migrate React string refs to createRef() object refs."""

__version__ = "0.1.0"
