"""Domain layer — character rules, entity table, and the argument value.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
