"""CLI command implementations for Eventfold.

This module contains the command group implementations:
- events: Write and read raw events
- aggregates: List, project and delete aggregates
- seed: Bootstrap initial data
- config: Manage configuration
"""
