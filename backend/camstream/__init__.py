"""camstream - live camera streaming through a credential-shielding proxy."""

__version__ = "1.0.0"
