"""Core modules for indoor wayfinding in multi-floor venues.

This package contains reusable components for venue navigation:
- graph: Navigation graph model, snapshot I/O and validation
- routing: Single-floor A*, cross-floor and multi-stop routing
- directions: Turn-by-turn direction generation
- rf: Signal-strength measurement models and position estimation
- estimators: Least squares solvers
- generation: Draft graph generation from floor-plan objects
"""

__version__ = "0.1.0"
