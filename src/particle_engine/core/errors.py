# particle_engine/core/errors.py


class ConfigurationError(ValueError):
    """Raised when an emitter, preset or sprite configuration is unusable."""
