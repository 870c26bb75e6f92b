"""
Wayfinding Examples.

Example scripts demonstrating the routing, directions and positioning
modules on a small synthetic two-floor venue.

Examples:
    - Cross-floor routing with turn-by-turn directions
    - Step-free routing, multi-stop tours and evacuation
    - Signal-strength positioning and live-position publishing
"""
