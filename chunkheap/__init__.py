"""A simulated first-fit heap allocator, its consistency checks and replayable workloads."""

__version__ = "0.1.0"
__all__ = ["check", "grades_a", "grades_b", "grades_c", "grades_d", "grades_e", "grades_f", "heap"]