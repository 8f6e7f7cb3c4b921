"""Routing — a single catch-all mount whose route is chosen by verb.

Capsula mounts three routes (GET/HEAD, POST and an any-method
fallback); lookups of the captured path against the capsule registry
happen in the dispatcher, not here.
"""
