# particle_engine/utils/math_utils.py


class MathUtils:
    """Small math helpers shared by the engine."""

    @staticmethod
    def clamp(value, min_val, max_val):
        """Clamps a value between a minimum and maximum."""
        return max(min_val, min(max_val, value))
